"""Service objects and errors for a managed DNS REST API."""

__version__ = "0.1.0"