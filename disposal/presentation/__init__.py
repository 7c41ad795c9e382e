"""Disposal Presentation Layer."""
