"""Settings shared by every environment module."""

import os
import urllib.parse


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def mysql_uri() -> str:
    """Build the MySQL URL from DB_* variables (RDS_* names still accepted)."""
    user = os.getenv("DB_USER", os.getenv("RDS_USERNAME", "root"))
    password = os.getenv("DB_PASSWORD", os.getenv("RDS_PASSWORD", ""))
    host = os.getenv("DB_HOST", os.getenv("RDS_HOSTNAME", "localhost"))
    port = int(os.getenv("DB_PORT", os.getenv("RDS_PORT", "3306")))
    name = os.getenv("DB_NAME", "soccer_db")

    # Mã hóa mật khẩu để xử lý ký tự '@' an toàn
    encoded_password = urllib.parse.quote_plus(password)
    return f"mysql+mysqlconnector://{user}:{encoded_password}@{host}:{port}/{name}"


TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(2 * 60 * 60)))
API_PORT = int(os.getenv("API_PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SQLALCHEMY_TRACK_MODIFICATIONS = False

DEMO_USERNAME = os.getenv("DEMO_USERNAME", "tifoso")
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "ForzaRagazz1")
