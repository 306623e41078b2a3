"""Scan pipeline helpers."""
