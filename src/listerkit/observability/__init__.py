"""Observability – logging for list engines."""
