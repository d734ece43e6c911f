"""Shift Close Toolkit application package."""
