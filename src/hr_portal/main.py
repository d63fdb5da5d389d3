from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .data.controller import register as register_data
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .records.controller import register as register_records
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    db_config = getattr(settings, "DB_CONFIG", None)
    if db_config:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
    else:
        logger.info("settings=%s (no remote backend configured)", settings_module)

    if db_config and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if db_config and bool(getattr(settings, "AUTO_SEED_DB", False)):
        added = ensure_demo_users(db_config)
        logger.info("Demo users ready (%d added)", added)

    container = build_container(
        db_config=db_config,
        storage_backend=getattr(settings, "STORAGE_BACKEND", "memory"),
        storage_dir=getattr(settings, "STORAGE_DIR", ""),
        key_prefix=getattr(settings, "STORAGE_KEY_PREFIX", "teal-"),
        local_latency=float(getattr(settings, "LOCAL_SERVICE_LATENCY", 0.5)),
        force_local=bool(getattr(settings, "FORCE_LOCAL_SERVICES", False)),
    )
    app.extensions["hr_portal"] = container

    register_records(app, container)
    register_data(app, container)
    register_users(app, container)

    return app
