from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .console.controller import run_menu
from .console.prompts import Console
from .container import build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger("diversity_audit")


def configure_logging(settings) -> None:
    debug = bool(getattr(settings, "DEBUG", False))
    level = "DEBUG" if debug else str(getattr(settings, "LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=level,
        format="[diversity-audit] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(settings)

    db_config = dict(getattr(settings, "DB_CONFIG"))
    debug = bool(getattr(settings, "DEBUG", False))
    logger.debug(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config)
        logger.info("demo seed ready")

    container = build_container(db_config=db_config)
    container.record_manager.load()

    run_menu(container.record_manager, Console(), debug=debug)


if __name__ == "__main__":
    main()
