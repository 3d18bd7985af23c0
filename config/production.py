import os

from .config import Config

DB_CONFIG = Config.db_config()

WORK_START_TIME = Config.WORK_START_TIME
WORK_END_TIME = Config.WORK_END_TIME

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
