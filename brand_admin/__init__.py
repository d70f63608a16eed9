"""Admin console for brand records held by a remote REST backend."""

__version__ = "0.1.0"
