"""Persistence models."""
