"""
Monetary amounts in a given currency
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

ETHER_ADDRESS = "0x0000000000000000000000000000000000000000"

Amount = Union[int, str]


def amount_string(value: Amount) -> Any:
    """Serialize integers as decimal strings, keep received strings untouched."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


@dataclass(frozen=True)
class Currency:
    ct: str
    id: Union[str, int] = "0"

    def to_dict(self) -> Dict[str, Any]:
        return {"ct": self.ct, "id": self.id}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Currency":
        return Currency(ct=d["ct"], id=d.get("id", "0"))


@dataclass(frozen=True)
class MonetaryAmount:
    """
    An integral amount (base units) of a currency.

    Amounts read with `from_dict` keep the exact string they were sealed with.
    """

    amount: Amount
    currency: Currency

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": amount_string(self.amount),
            "currency": self.currency.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MonetaryAmount":
        return MonetaryAmount(
            amount=d["amount"],
            currency=Currency.from_dict(d["currency"]),
        )

    @staticmethod
    def ether(amount: Amount) -> "MonetaryAmount":
        return MonetaryAmount(amount=int(amount), currency=Currency(ct=ETHER_ADDRESS))
