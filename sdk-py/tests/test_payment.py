"""Tests for payment sealing."""

from nahmii_sdk import (
    PAYMENT_HASHED_PROPERTIES,
    MonetaryAmount,
    Payment,
    hash_object,
)

from conftest import PAYER_KEY, STRANGER_KEY, TOKEN, address_of


class TestPayment:
    """Test Payment sealing and verification."""

    def test_unsigned(self, payment):
        """Test that a fresh payment is not signed."""
        assert payment.seal is None
        assert not payment.is_signed()
        assert payment.to_dict()["seals"] == {}

    def test_sign(self, signed_payment):
        """Test that the sender's seal verifies."""
        assert signed_payment.is_signed()
        seal = signed_payment.to_dict()["seals"]["wallet"]
        assert seal["hash"] == hash_object(signed_payment.to_dict(), PAYMENT_HASHED_PROPERTIES)
        assert set(seal["signature"]) == {"v", "r", "s"}

    def test_signed_by_someone_else(self, payment):
        """Test that a seal by another key is rejected."""
        payment.sign(STRANGER_KEY)
        assert not payment.is_signed()

    def test_tampered_amount(self, signed_payment):
        """Test that changing the amount breaks the seal."""
        signed_payment.amount = MonetaryAmount(amount=1001, currency=TOKEN)
        assert not signed_payment.is_signed()

    def test_tampered_recipient(self, signed_payment):
        """Test that changing the recipient breaks the seal."""
        signed_payment.recipient = address_of(STRANGER_KEY)
        assert not signed_payment.is_signed()

    def test_tampered_sender(self, signed_payment):
        """Test that claiming another sender breaks the seal."""
        signed_payment.sender = address_of(STRANGER_KEY)
        assert not signed_payment.is_signed()

    def test_resign_overwrites(self, signed_payment):
        """Test that signing again replaces the seal."""
        signed_payment.amount = MonetaryAmount(amount=5, currency=TOKEN)
        signed_payment.sign(PAYER_KEY)
        assert signed_payment.is_signed()

    def test_from_dict(self, provider, signed_payment):
        """Test that a deserialized payment keeps its seal."""
        copy = Payment.from_dict(provider, signed_payment.to_dict())
        assert copy.to_dict() == signed_payment.to_dict()
        assert copy.is_signed()
        assert copy.provider is provider

    def test_from_dict_tampered(self, provider, signed_payment):
        """Test that tampering with serialized data is detected."""
        data = signed_payment.to_dict()
        data["amount"] = "999999"
        assert not Payment.from_dict(provider, data).is_signed()

    def test_from_dict_malformed_seal(self, provider, signed_payment):
        """Test that a malformed seal fails closed."""
        data = signed_payment.to_dict()
        data["seals"]["wallet"]["signature"] = {"v": "x"}
        assert not Payment.from_dict(provider, data).is_signed()


class TestMonetaryAmount:
    """Test MonetaryAmount serialization."""

    def test_integers_serialize_as_decimals(self):
        """Test that locally set integers become decimal strings."""
        assert MonetaryAmount(amount=1000, currency=TOKEN).to_dict()["amount"] == "1000"

    def test_received_strings_are_kept(self):
        """Test that received amount strings are not normalized."""
        for amount in ("0100", "0x10"):
            data = {"amount": amount, "currency": TOKEN.to_dict()}
            assert MonetaryAmount.from_dict(data).to_dict() == data
