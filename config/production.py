import os

from .config import *  # noqa: F401,F403
from .config import env_flag, mysql_uri

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
TOKEN_SECRET = os.getenv("TOKEN_SECRET", "please-set-TOKEN_SECRET")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or mysql_uri()
SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

DEBUG = False
URL_PREFIX = os.getenv("URL_PREFIX", "/backend")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
