# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .example_model_service import ExampleModelService

__all__ = [
    "ExampleModelService",
]
