"""Shared utilities for web_validate."""
