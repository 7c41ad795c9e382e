"""Disposal Service - waste photo classification and nearby disposal lookup."""
