"""
Payout Details Value Objects

Where a seller's balance is paid out. Stored as JSON tagged with `kind`.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, ClassVar

from marketplace.core.domain import ValidationException, ValueObject

_IFSC_PATTERN = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")
_UPI_PATTERN = re.compile(r"^[\w.\-]{2,256}@[A-Za-z]{2,64}$")


@dataclass(frozen=True)
class BankTransferPayout(ValueObject):
    kind: ClassVar[str] = "bank_transfer"

    account_holder_name: str
    bank_name: str
    account_number: str
    ifsc_code: str

    def _validate(self) -> None:
        if not self.account_holder_name.strip() or not self.bank_name.strip():
            raise ValidationException("Account holder and bank name are required", field="payout_details")
        if not self.account_number.isdigit() or not 6 <= len(self.account_number) <= 20:
            raise ValidationException("Account number must be 6-20 digits", field="account_number")
        if not _IFSC_PATTERN.match(self.ifsc_code):
            raise ValidationException("Invalid IFSC code", field="ifsc_code")

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class UpiPayout(ValueObject):
    kind: ClassVar[str] = "upi"

    upi_id: str

    def _validate(self) -> None:
        if not _UPI_PATTERN.match(self.upi_id):
            raise ValidationException("Invalid UPI id", field="upi_id")

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


PayoutDetails = BankTransferPayout | UpiPayout

_PAYOUT_KINDS: dict[str, type[BankTransferPayout] | type[UpiPayout]] = {
    BankTransferPayout.kind: BankTransferPayout,
    UpiPayout.kind: UpiPayout,
}


def parse_payout_details(data: dict[str, Any] | None) -> PayoutDetails | None:
    """Rebuild payout details from their stored JSON form."""
    if not data:
        return None
    payload = dict(data)
    kind = payload.pop("kind", None)
    payout_cls = _PAYOUT_KINDS.get(kind)
    if payout_cls is None:
        raise ValidationException(f"Unknown payout kind: {kind!r}", field="payout_details")
    try:
        return payout_cls(**payload)
    except TypeError as e:
        raise ValidationException(f"Malformed {kind} payout details: {e}", field="payout_details") from e
