from __future__ import annotations

from enum import Enum


class GenderCategory(str, Enum):
    """Buckets used by the diversity snapshot; gender itself stays free text."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"
    OTHER = "Other/Unspecified"

    @classmethod
    def classify(cls, gender: str | None) -> "GenderCategory":
        g = (gender or "").lower()
        # "female" contains "male", so it has to be checked first.
        if "female" in g:
            return cls.FEMALE
        if "male" in g:
            return cls.MALE
        if "non" in g:
            return cls.NON_BINARY
        return cls.OTHER
