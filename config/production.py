import os

from .config import DB_CONFIG, Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DOCUMENT_STORE = os.getenv("DOCUMENT_STORE", "mysql").lower()
DB_CONFIG = dict(DB_CONFIG)
DEFAULT_PAY_PERIOD_START = Config.DEFAULT_PAY_PERIOD_START

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
