import bcrypt

from backend.core import config

# bcrypt ignores (or rejects) input past this many bytes.
MAX_PASSWORD_BYTES = 72


def hash_password(plain: str) -> str:
    if not plain:
        raise ValueError("Password is required.")
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash or over-long input
        return False
