"""
Password hashing

Author: TM3
Date: 2026-10-19

Passwords are stored as bcrypt hashes only. Plaintext never leaves the
Password value object's factory.
"""
from passlib.context import CryptContext

from storefront.core.config import settings

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a stored hash; unknown hash formats never match"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
