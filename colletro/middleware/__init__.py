"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (first added = outermost).
Import and use from colletro.main.
"""

from colletro.middleware.request_id import RequestIDMiddleware
from colletro.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
