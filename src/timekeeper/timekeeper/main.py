from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import now_local, parse_iso_date
from .container import build_container, build_store
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .database.connection import DatabaseConnection, DBConfig
from .database.document_store import DocumentStore
from .payroll.controller import register as register_payroll
from .punches.controller import register as register_punches
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    store: Optional[DocumentStore] = None,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    backend = getattr(settings, "DOCUMENT_STORE", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s store=%s", settings_module, backend if store is None else type(store).__name__)

    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            conn_factory = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            apply_schema(conn_factory, database=str(db_config["database"]), schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(conn_factory)))
        store = build_store(backend, db_config=db_config)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(store, today=clock().date())

    default_anchor_s = getattr(settings, "DEFAULT_PAY_PERIOD_START", None)
    default_anchor = parse_iso_date(default_anchor_s) if default_anchor_s else None

    container = build_container(store=store, default_anchor=default_anchor, clock=clock)
    app.extensions["timekeeper"] = container

    register_users(app, container)
    register_punches(app, container)
    register_payroll(app, container)

    return app
