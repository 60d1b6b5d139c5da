"""AutoFlow workflow automation backend."""

__version__ = "1.0.0"
