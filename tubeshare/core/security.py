# ============================================================================
# FILE: tubeshare/core/security.py
# ============================================================================
from typing import Optional
import bcrypt
import jwt
from pydantic import ValidationError
from tubeshare.config import settings
from tubeshare.core.exceptions import AuthError, InvalidPasswordError
from tubeshare.schemas.user import TokenPayload

# bcrypt ignores or rejects input past this many bytes
MAX_PASSWORD_BYTES = 72

def get_password_hash(password: str) -> str:
    """Salted bcrypt hash using the configured cost factor"""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidPasswordError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash, or a password bcrypt refuses
        return False

def create_access_token(user_id: int) -> str:
    """
    Sign a token carrying only the user id.
    No expiry is set; rotating SECRET_KEY is the only way to revoke.
    """
    return jwt.encode({"id": user_id}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: Optional[str]) -> TokenPayload:
    """
    Verify the signature and validate the payload shape.
    Raises AuthError for anything that is not a well-formed token of ours.
    """
    if not token:
        raise AuthError("Missing token")
    
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        raise AuthError("Invalid token")
    
    try:
        return TokenPayload.model_validate(payload)
    except ValidationError:
        raise AuthError("Invalid token payload")
