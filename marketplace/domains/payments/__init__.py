"""Payments bounded context: settlement, seller ledger and revenue reporting."""
