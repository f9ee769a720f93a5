"""Utility helpers for booklabels."""
