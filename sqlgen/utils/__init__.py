"""Utility modules for sqlgen."""
