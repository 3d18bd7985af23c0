import os

from .config import Config

DB_CONFIG = dict(Config.db_config(), database=os.getenv("DB_NAME", "trainee_attendance_test"))

WORK_START_TIME = "09:00"
WORK_END_TIME = "18:00"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
