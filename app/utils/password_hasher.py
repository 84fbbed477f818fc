from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

ph = PasswordHasher()


def hash_password(password: str) -> str:
    """password hasher
    """
    return ph.hash(password)


def check_password(hashed_password: str, password: str) -> bool:
    """to verify password, False on mismatch or a malformed hash
    """
    try:
        return ph.verify(hashed_password, password)
    except (VerificationError, InvalidHashError):
        return False
