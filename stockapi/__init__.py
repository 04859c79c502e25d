"""JSON HTTP API for products and units of measure, stored in a SQL database."""

__version__ = "0.1.0"
__all__ = ["__version__"]