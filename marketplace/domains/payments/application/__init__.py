"""Payments application layer."""
