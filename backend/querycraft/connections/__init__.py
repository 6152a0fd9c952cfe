"""Stored database connections."""
