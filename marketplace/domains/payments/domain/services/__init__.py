"""Payments domain services."""

from .split_calculator import SellerSplit, SplitCalculator

__all__ = ["SellerSplit", "SplitCalculator"]
