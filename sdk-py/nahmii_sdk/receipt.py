"""
Payment receipts, sealed by the exchange operator on top of a sealed payment
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .crypto import PrivateKeyLike
from .monetary_amount import Amount, MonetaryAmount, amount_string
from .payment import PAYMENT_HASHED_PROPERTIES, Payment
from .seal import Seal, is_sealed_by, seal_record

RECEIPT_HASHED_PROPERTIES = PAYMENT_HASHED_PROPERTIES + [
    "seals.wallet.hash",
    "seals.wallet.signature.v",
    "seals.wallet.signature.r",
    "seals.wallet.signature.s",
    "nonce",
    "sender.nonce",
    "sender.balances.current",
    "sender.balances.previous",
    "sender.fees.single.currency",
    "sender.fees.single.amount",
    "sender.fees.net.*.currency",
    "sender.fees.net.*.amount",
    "recipient.nonce",
    "recipient.balances.current",
    "recipient.balances.previous",
    "recipient.fees.single.currency",
    "recipient.fees.single.amount",
    "recipient.fees.net.*.currency",
    "recipient.fees.net.*.amount",
    "transfers.single",
    "transfers.net",
]


@dataclass
class PartyState:
    """
    Operator assigned state of one side (sender or recipient) of a payment.

    Values read with `from_dict` are kept exactly as received so that the
    exchange seal still verifies; integers set locally serialize as decimals.
    """

    nonce: Optional[Amount] = None
    current_balance: Optional[Amount] = None
    previous_balance: Optional[Amount] = None
    single_fee: Optional[MonetaryAmount] = None
    net_fees: List[MonetaryAmount] = field(default_factory=list)

    def update_dict(self, d: Dict[str, Any]) -> None:
        """Write the set fields into a serialized party section."""
        if self.nonce is not None:
            d["nonce"] = self.nonce

        balances = {}
        if self.current_balance is not None:
            balances["current"] = amount_string(self.current_balance)
        if self.previous_balance is not None:
            balances["previous"] = amount_string(self.previous_balance)
        if balances:
            d["balances"] = balances

        fees = {}
        if self.single_fee is not None:
            fees["single"] = self.single_fee.to_dict()
        if self.net_fees:
            fees["net"] = [f.to_dict() for f in self.net_fees]
        if fees:
            d["fees"] = fees

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PartyState":
        balances = d.get("balances") or {}
        fees = d.get("fees") or {}
        single = fees.get("single")
        return PartyState(
            nonce=d.get("nonce"),
            current_balance=balances.get("current"),
            previous_balance=balances.get("previous"),
            single_fee=MonetaryAmount.from_dict(single) if single else None,
            net_fees=[MonetaryAmount.from_dict(f) for f in fees.get("net") or []],
        )


class Receipt:
    """
    A receipt for a payment, completed and sealed by the exchange operator.

    The receipt keeps its own copy of the payment. It is only signed when the
    payment carries a valid wallet seal and the receipt itself carries a valid
    exchange seal from the provider's operator.
    """

    def __init__(self, provider, payment: Optional[Payment]):
        self._provider = provider
        self._payment = (
            Payment.from_dict(provider, payment.to_dict()) if payment is not None else None
        )
        self.nonce: Optional[Amount] = None
        self.sender = PartyState()
        self.recipient = PartyState()
        self.single_transfer: Optional[Amount] = None
        self.net_transfer: Optional[Amount] = None
        self._seal: Optional[Seal] = None

    @property
    def provider(self):
        return self._provider

    @property
    def payment(self) -> Optional[Payment]:
        return self._payment

    @property
    def seal(self) -> Optional[Seal]:
        return self._seal

    def sign(self, private_key: PrivateKeyLike) -> None:
        """Seal the receipt with the operator's private key."""
        self._seal = seal_record(self.to_dict(), RECEIPT_HASHED_PROPERTIES, private_key)

    def is_signed(self) -> bool:
        """True if both the payment and the receipt are untampered and sealed."""
        if self._payment is None or not self._payment.is_signed():
            return False
        if self._seal is None:
            return False
        return is_sealed_by(
            self.to_dict(),
            RECEIPT_HASHED_PROPERTIES,
            self._seal,
            self._provider.operator_address,
        )

    def to_dict(self) -> Dict[str, Any]:
        if self._payment is None:
            return {}

        result = self._payment.to_dict()

        if self.nonce is not None:
            result["nonce"] = self.nonce

        self.sender.update_dict(result["sender"])
        self.recipient.update_dict(result["recipient"])

        transfers = {}
        if self.single_transfer is not None:
            transfers["single"] = amount_string(self.single_transfer)
        if self.net_transfer is not None:
            transfers["net"] = amount_string(self.net_transfer)
        if transfers:
            result["transfers"] = transfers

        if self._seal is not None:
            result["seals"]["exchange"] = self._seal.to_dict()

        return result

    @staticmethod
    def from_dict(provider, d: Dict[str, Any]) -> "Receipt":
        receipt = Receipt(provider, None)
        receipt._payment = Payment.from_dict(provider, d)
        receipt.nonce = d.get("nonce")

        if d.get("sender"):
            receipt.sender = PartyState.from_dict(d["sender"])
        if d.get("recipient"):
            receipt.recipient = PartyState.from_dict(d["recipient"])

        transfers = d.get("transfers") or {}
        receipt.single_transfer = transfers.get("single")
        receipt.net_transfer = transfers.get("net")

        seals = d.get("seals") or {}
        if seals.get("exchange"):
            receipt._seal = Seal.from_dict(seals["exchange"])

        return receipt
