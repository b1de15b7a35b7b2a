"""Observability – structured logging helpers."""
from pgrest_filters.observability.logging import (
    MAX_LOGGED_FRAGMENT,
    configure_logging,
    get_logger,
    truncate_fragments,
)

__all__ = ["MAX_LOGGED_FRAGMENT", "configure_logging", "get_logger", "truncate_fragments"]
