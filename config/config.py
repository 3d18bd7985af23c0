import os


class Config:
    """Settings shared by every environment; each value may come from the environment."""

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "trainee_attendance")

    # Scheduled work window used for tardy/early-leave classification
    WORK_START_TIME = os.environ.get("WORK_START_TIME", "09:00")
    WORK_END_TIME = os.environ.get("WORK_END_TIME", "18:00")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
