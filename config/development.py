import os

from .config import Config

DB_CONFIG = Config.db_config()

WORK_START_TIME = Config.WORK_START_TIME
WORK_END_TIME = Config.WORK_END_TIME

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# If enabled, schema.sql is applied on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
