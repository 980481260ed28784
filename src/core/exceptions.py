class WaitlistError(Exception):
    """Base class for waitlist errors"""


class EmailValidationError(WaitlistError):
    """Raised when a submitted email address is malformed"""

    def __init__(self, message: str, field: str = "email"):
        super().__init__(message)
        self.field = field
        self.message = message


class StoreError(WaitlistError):
    """Raised when the membership store is unreachable, times out or fails"""
