"""
Password hashing.

Argon2 through passlib: slow, salted and self-describing, so the cost
parameters travel inside every stored hash.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted one-way hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """
    Check ``password`` against a stored hash.

    Returns False for a wrong password and for hashes passlib cannot
    identify or parse.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        return False
