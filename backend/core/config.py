import os
from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./blog.db")

JWT_SECRET_KEY = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", str(24 * 60)))

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "token")
COOKIE_SECURE = _get_bool(os.getenv("COOKIE_SECURE"), default=False)

CORS_ORIGINS = _get_list(
    os.getenv("CORS_ORIGINS"),
    default=["http://localhost:3000", "https://simply-client.vercel.app"],
)

PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(PUBLIC_DIR, "Images"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
DEFAULT_ROLE = os.getenv("DEFAULT_ROLE", "visitor")

def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET must be set in production.")
