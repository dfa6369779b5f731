# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - entities.py: ExampleModel CRUD endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import entities

__all__ = [
    "health",
    "entities",
]
