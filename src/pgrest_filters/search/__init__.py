"""Search – session of active filters for one listing view."""
from pgrest_filters.search.session import Position, SearchSession

__all__ = ["Position", "SearchSession"]
