"""Utility helpers for scribe."""
