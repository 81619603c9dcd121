"""
Transaction Status Value Object
"""

from marketplace.core.domain import StatusEnum


class TransactionStatus(StatusEnum):
    """
    Status of a settlement ledger row.

    Settlement writes rows as COMPLETED; the other values are reserved for
    payment flows handled outside this service.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
