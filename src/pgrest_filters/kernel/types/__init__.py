"""Kernel value types – public re-export surface.

Modules:
  option.py: Some, Nothing, Option
"""

from pgrest_filters.kernel.types.option import NOTHING, Nothing, Option, Some

__all__ = ["NOTHING", "Nothing", "Option", "Some"]
