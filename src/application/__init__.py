"""Application layer package."""
