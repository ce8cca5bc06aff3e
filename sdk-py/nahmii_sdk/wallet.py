"""
Wallets: a local signing account bound to a provider
"""

from eth_account import Account

from .payment import Payment


class Wallet:
    """
    A local account connected to a NahmiiProvider.

    Contracts accept a wallet wherever they accept a provider, and read the
    network from `wallet.provider`.
    """

    def __init__(self, private_key: str, provider):
        self._account = Account.from_key(private_key)
        self.provider = provider

    @property
    def address(self) -> str:
        return self._account.address

    def sign_payment(self, payment: Payment) -> Payment:
        """Seal a payment sent from this wallet."""
        if payment.sender.lower() != self.address.lower():
            raise ValueError(
                f"Payment sender {payment.sender} is not wallet {self.address}"
            )
        payment.sign(bytes(self._account.key))
        return payment
