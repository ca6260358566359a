"""Incident Desk — in-memory security incident tracker."""

__version__ = "1.0.0"
