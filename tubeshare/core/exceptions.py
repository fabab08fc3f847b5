# ============================================================================
# FILE: tubeshare/core/exceptions.py
# ============================================================================

class TubeShareError(Exception):
    """Base class for domain errors raised by the service layer"""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class AuthError(TubeShareError):
    """Token missing, invalid, or pointing at a user that no longer exists"""

class ConflictError(TubeShareError):
    """Unique constraint violated (e.g. email already registered)"""

class InvalidPasswordError(TubeShareError):
    """Password cannot be hashed (bcrypt only accepts up to 72 bytes)"""
