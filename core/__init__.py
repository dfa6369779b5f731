# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the persistence-facing logic:
# - models/: Pydantic schemas for data validation
# - services/: Data access services over a SQLAlchemy session
# =============================================================================
