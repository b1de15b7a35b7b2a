"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ConfigError          (pgrest_filters.config.errors)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

Parsing and serialising filters never raise; these errors only surface when
a schema or a settings object is built from bad data.
"""

from pgrest_filters.kernel.errors.base import BaseError
from pgrest_filters.kernel.errors.domain import DomainError, ValidationError

__all__ = ["BaseError", "DomainError", "ValidationError"]
