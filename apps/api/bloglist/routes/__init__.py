"""Route modules."""

from .blogs import router as blogs_router
from .login import router as login_router
from .users import router as users_router

__all__ = ["blogs_router", "login_router", "users_router"]
