import bcrypt

from prepper.core import config

# bcrypt only uses the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(plaintext: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(plaintext), salt).decode('utf-8')


def verify_password(plaintext: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode('utf-8'))
    except ValueError:
        # Malformed or non-bcrypt hash.
        return False
