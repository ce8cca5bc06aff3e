"""
Payments between two wallets, sealed by the sending wallet
"""

from typing import Any, Dict, Optional

from .crypto import PrivateKeyLike
from .monetary_amount import MonetaryAmount
from .seal import Seal, is_sealed_by, seal_record

PAYMENT_HASHED_PROPERTIES = [
    "amount",
    "currency.ct",
    "currency.id",
    "sender.wallet",
    "recipient.wallet",
]


class Payment:
    """
    A payment of `amount` from the `sender` wallet to the `recipient` wallet.

    The wallet seal is only written by `sign()`; changing any hashed property
    afterwards makes `is_signed()` report False.
    """

    def __init__(self, provider, amount: MonetaryAmount, sender: str, recipient: str):
        self._provider = provider
        self.amount = amount
        self.sender = sender
        self.recipient = recipient
        self._seal: Optional[Seal] = None

    @property
    def provider(self):
        return self._provider

    @property
    def seal(self) -> Optional[Seal]:
        return self._seal

    def sign(self, private_key: PrivateKeyLike) -> None:
        """Seal the payment with the sender's private key."""
        self._seal = seal_record(self.to_dict(), PAYMENT_HASHED_PROPERTIES, private_key)

    def is_signed(self) -> bool:
        """True if the payment is untampered and sealed by its sender."""
        if self._seal is None:
            return False
        return is_sealed_by(
            self.to_dict(), PAYMENT_HASHED_PROPERTIES, self._seal, self.sender
        )

    def to_dict(self) -> Dict[str, Any]:
        amount = self.amount.to_dict()
        result = {
            "amount": amount["amount"],
            "currency": amount["currency"],
            "sender": {"wallet": self.sender},
            "recipient": {"wallet": self.recipient},
            "seals": {},
        }
        if self._seal is not None:
            result["seals"]["wallet"] = self._seal.to_dict()
        return result

    @staticmethod
    def from_dict(provider, d: Dict[str, Any]) -> "Payment":
        payment = Payment(
            provider,
            MonetaryAmount.from_dict(d),
            sender=d["sender"]["wallet"],
            recipient=d["recipient"]["wallet"],
        )
        seals = d.get("seals") or {}
        if seals.get("wallet"):
            payment._seal = Seal.from_dict(seals["wallet"])
        return payment
