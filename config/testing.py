from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"
TOKEN_SECRET = "test-token-secret"
TOKEN_TTL_SECONDS = 2 * 60 * 60

SQLALCHEMY_DATABASE_URI = "sqlite://"

DEBUG = False
TESTING = True
URL_PREFIX = ""
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
