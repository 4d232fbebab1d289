"""Example: use the record manager directly (no console menu).

Controllers stay thin; the roster logic lives in the service layer.
"""

import importlib

from config import get_settings_module

from diversity_audit.console.views import metrics_report
from diversity_audit.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    container.record_manager.load()
    print("\n".join(metrics_report(container.record_manager.compute_metrics())))


if __name__ == "__main__":
    main()
