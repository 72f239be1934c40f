"""Robot soccer field helpers: Voronoi graph types and path search, a field scene model, UDP vision transport and simulator control helpers."""

__version__ = "0.1.0"