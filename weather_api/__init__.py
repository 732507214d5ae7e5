"""Synthetic weather forecast and temperature statistics service."""
