"""folio — static portfolio and blog site generator."""

__version__ = "0.1.0"
