SECRET_KEY = "test-secret"

DOCUMENT_STORE = "memory"
DB_CONFIG = None
DEFAULT_PAY_PERIOD_START = "2025-01-01"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
