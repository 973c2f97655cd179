import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "timekeeper-dev-secret"

    # Storage backend: "memory" (in-process, lost on restart) or "mysql"
    DOCUMENT_STORE = os.environ.get("DOCUMENT_STORE", "memory").lower()

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "timekeeper_db")

    # Used until an admin stores a pay-period start; empty means "today"
    DEFAULT_PAY_PERIOD_START = os.environ.get("DEFAULT_PAY_PERIOD_START", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
