from .auth_controller import router as auth_router
from .account_controller import router as account_router


__all__ = ["auth_router", "account_router"]
