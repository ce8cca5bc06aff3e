"""
NullSettlement contract handle
"""

from typing import Optional

from .abstractions import DeploymentRegistry
from .contract import NahmiiContract, checked

CONTRACT_NAME = "NullSettlement"


class NullSettlementContract(NahmiiContract):
    def __init__(self, wallet_or_provider, registry: Optional[DeploymentRegistry] = None):
        super().__init__(CONTRACT_NAME, wallet_or_provider, registry=registry)

    @classmethod
    def create(
        cls,
        wallet_or_provider,
        accept_invalid: Optional[bool] = None,
        registry: Optional[DeploymentRegistry] = None,
    ) -> Optional["NullSettlementContract"]:
        """Build and validate the NullSettlement handle, see NahmiiContract.from_name."""
        return checked(cls(wallet_or_provider, registry=registry), accept_invalid)
