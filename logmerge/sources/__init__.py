from .random_source import RandomLogSource, make_sources

__all__ = ["RandomLogSource", "make_sources"]
