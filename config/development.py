import os

from .config import *  # noqa: F401,F403
from .config import env_flag, mysql_uri

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
TOKEN_SECRET = os.getenv("TOKEN_SECRET", "dev-token-secret")

# Without DB_HOST a local SQLite file is used so the API runs out of the box.
SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or (
    mysql_uri() if os.getenv("DB_HOST") else "sqlite:///soccer_dev.db"
)

DEBUG = True
URL_PREFIX = os.getenv("URL_PREFIX", "")

# If enabled, app will create missing tables on startup
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
