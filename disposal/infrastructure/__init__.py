"""Disposal Infrastructure Layer."""
