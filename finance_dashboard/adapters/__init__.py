"""Adapters exposing the finance dashboard to users."""

__all__ = []
