"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (last added = outermost).
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
