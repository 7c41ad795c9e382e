"""Disposal Application Layer."""
