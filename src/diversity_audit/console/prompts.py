from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_yes_no


class Console:
    """Line-oriented console I/O.

    Note: input/output functions are injectable so tests can script a session.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output_fn

    def write(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def read_int(self, prompt: str) -> int:
        raw = self.ask(prompt)
        while True:
            try:
                return int(raw)
            except ValueError:
                raw = self.ask("Enter a valid integer: ")

    def read_int_in_range(self, prompt: str, low: int, high: int) -> int:
        value = self.read_int(prompt)
        while value < low or value > high:
            value = self.read_int(f"Enter a value between {low} and {high}: ")
        return value

    def read_optional_int(self, prompt: str) -> Optional[int]:
        """Blank answer means "keep current value"."""
        raw = self.ask(prompt)
        while raw:
            try:
                return int(raw)
            except ValueError:
                raw = self.ask("Enter a valid integer (or leave blank): ")
        return None

    def read_yes_no(self, prompt: str) -> bool:
        answer = parse_yes_no(self.ask(prompt))
        while answer is None:
            answer = parse_yes_no(self.ask("Please answer yes or no: "))
        return answer

    def read_optional_yes_no(self, prompt: str) -> Optional[bool]:
        raw = self.ask(prompt)
        while raw:
            answer = parse_yes_no(raw)
            if answer is not None:
                return answer
            raw = self.ask("Please answer yes or no (or leave blank): ")
        return None

    def read_optional_date(self, prompt: str) -> Optional[date]:
        raw = self.ask(prompt)
        while raw:
            try:
                return parse_iso_date(raw)
            except ValueError:
                raw = self.ask("Enter a date as YYYY-MM-DD (or leave blank for today): ")
        return None
