"""Streamlit user interface."""

__all__ = []
