"""Streamlit interface package."""
