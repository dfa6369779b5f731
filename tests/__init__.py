# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the ExampleModel API:
# - test_config.py: Settings loading and validation
# - test_models.py: Unit tests for Pydantic model validation
# - test_database.py: Engine, schema and connectivity helpers
# - test_example_model_service.py: Data access layer behaviour
# - test_entities_api.py: CRUD endpoints and error mapping
# - test_health.py: Health, readiness and liveness endpoints
#
# Run tests with: pytest
# =============================================================================
