"""Identity and ownership-authorization components."""

from .extraction import extract_bearer_token
from .identity import IdentityResolver
from .ownership import OwnershipEnforcer
from .passwords import PasswordHasher
from .registration import validate_registration
from .tokens import InvalidTokenError, TokenService

__all__ = [
    "IdentityResolver",
    "InvalidTokenError",
    "OwnershipEnforcer",
    "PasswordHasher",
    "TokenService",
    "extract_bearer_token",
    "validate_registration",
]
