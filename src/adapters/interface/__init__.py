"""Interface adapters package."""
