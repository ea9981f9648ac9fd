from .auth_controller import router as auth_router
from .post_controller import router as post_router


__all__ = ["auth_router", "post_router"]
