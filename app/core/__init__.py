"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the shop and the payment
gateway plugins. It holds no shop or gateway logic.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Services (import from core.services):
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - NotFoundError: Resource not found
    - ConflictError: State conflicts (duplicates, out-of-order calls)

Helpers (import from core.helpers):
    - get_client_ip: Client IP extraction from request

Usage:
    from core.models import BaseModel
    from core.model_mixins import UUIDPrimaryKeyMixin
    from core.services import ServiceResult
    from core.exceptions import NotFoundError
    from core.helpers import get_client_ip

Note:
    Django models and model mixins are NOT imported here to avoid
    AppRegistryNotReady errors. Import them directly from their modules.
"""

# Services (no Django model dependencies)
from .services import ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    ConflictError,
    NotFoundError,
)

# Helpers (no Django model dependencies)
from .helpers import get_client_ip

__all__ = [
    # Services
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "NotFoundError",
    "ConflictError",
    # Helpers
    "get_client_ip",
]
