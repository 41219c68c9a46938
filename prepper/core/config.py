import os

from dotenv import load_dotenv


load_dotenv()


def _get_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


APP_ENV = os.getenv("APP_ENV", "development")

DB_FILE = os.getenv("DB_FILE", "./db.json")

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_DAYS = _get_int(os.getenv("JWT_EXPIRES_DAYS"), 7)

BCRYPT_ROUNDS = _get_int(os.getenv("BCRYPT_ROUNDS"), 10)

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@prepper.test")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "Password123!")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin User")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
