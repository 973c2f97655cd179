import os

from .config import DB_CONFIG, Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DOCUMENT_STORE = Config.DOCUMENT_STORE
DB_CONFIG = dict(DB_CONFIG)
DEFAULT_PAY_PERIOD_START = Config.DEFAULT_PAY_PERIOD_START

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# If enabled with the mysql store, app applies schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Demo users admin/admin, alice/password1, bob/password2
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
