# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Request-scoped database session and service injection
# - exceptions.py: Error hierarchy and HTTP error mapping
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence to the core/ package.
# =============================================================================

__version__ = "1.0.0"
