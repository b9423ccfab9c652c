from .auth import AuthMiddleware, PUBLIC_PATHS
from .request_id import RequestIDMiddleware

__all__ = ["AuthMiddleware", "PUBLIC_PATHS", "RequestIDMiddleware"]
