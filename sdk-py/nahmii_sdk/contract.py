"""
Contract handles resolved from bundled deployments and validated against
the live cluster
"""

import logging
from typing import Optional

from eth_utils import is_hex_address
from web3 import Web3

from .abstractions import DeploymentRegistry, default_registry, network_name_for
from .config import settings

logger = logging.getLogger(__name__)

NO_CODE = "0x"


def _provider_of(wallet_or_provider):
    if getattr(wallet_or_provider, "network", None) is not None:
        return wallet_or_provider
    return wallet_or_provider.provider


class NahmiiContract:
    """
    A deployed contract known by its symbolic name.

    Construction resolves the deployment for the connected network and fails
    with a ResolutionError when it cannot. Whether the deployment is still the
    one the cluster uses is checked separately by `validate()`.
    """

    def __init__(
        self,
        contract_name: str,
        wallet_or_provider,
        registry: Optional[DeploymentRegistry] = None,
    ):
        provider = _provider_of(wallet_or_provider)
        network = provider.network
        descriptor = (registry or default_registry()).get(
            network_name_for(network), contract_name
        )

        self.contract_name = contract_name
        self.address = descriptor.address_for(network.chain_id)
        self.abi = descriptor.abi
        self.signer_or_provider = wallet_or_provider
        self.provider = provider
        self._contract = None

    @property
    def contract(self):
        """web3 contract object at the resolved address."""
        if self._contract is None:
            self._contract = self.provider.web3.eth.contract(
                address=Web3.to_checksum_address(self.address), abi=self.abi
            )
        return self._contract

    def find_inconsistency(self) -> Optional[str]:
        """
        Compare the handle with the live cluster.

        Returns the first inconsistency found, or None when the cluster
        registers this contract at this address on this network and code is
        deployed there.
        """
        cluster = self.provider.get_cluster_information()
        if not isinstance(cluster, dict):
            return f"cluster information {cluster!r} is not an object"

        ethereum = cluster.get("ethereum")
        if not isinstance(ethereum, dict):
            return f"cluster ethereum section {ethereum!r} is not an object"

        network_name = self.provider.network.name
        if ethereum.get("net") != network_name:
            return f"cluster network {ethereum.get('net')!r} is not {network_name!r}"

        contracts = ethereum.get("contracts")
        if not isinstance(contracts, dict):
            return f"cluster contract registry {contracts!r} is not an object"

        registered = contracts.get(self.contract_name)
        if registered is None:
            return "contract is not registered in the cluster"

        if not is_hex_address(registered):
            return f"registered address {registered!r} is malformed"

        if not is_hex_address(self.address) or registered.lower() != self.address.lower():
            return f"registered address {registered} differs from {self.address!r}"

        code = self.provider.get_code(self.address)
        if not code or code == NO_CODE:
            return f"no code deployed at {self.address}"

        return None

    def validate(self) -> bool:
        """True if the deployment matches the live cluster."""
        return self.find_inconsistency() is None

    @staticmethod
    def from_name(
        contract_name: str,
        wallet_or_provider,
        accept_invalid: Optional[bool] = None,
        registry: Optional[DeploymentRegistry] = None,
    ) -> Optional["NahmiiContract"]:
        """
        Build and validate a contract handle.

        An invalid contract is logged and dropped (None), unless
        `accept_invalid` is set, in which case the handle is still returned.
        Without `accept_invalid`, `settings.accept_invalid_contracts` decides.
        """
        contract = NahmiiContract(contract_name, wallet_or_provider, registry=registry)
        return checked(contract, accept_invalid)


def checked(
    contract: NahmiiContract, accept_invalid: Optional[bool] = None
) -> Optional[NahmiiContract]:
    """Return the contract if valid or accepted while invalid, otherwise None."""
    if accept_invalid is None:
        accept_invalid = settings.accept_invalid_contracts

    reason = contract.find_inconsistency()
    if reason is None:
        return contract

    logger.warning(
        "Contract %s at %s is invalid on network %s: %s (%s)",
        contract.contract_name,
        contract.address,
        contract.provider.network.name,
        reason,
        "using it anyway" if accept_invalid else "dropping it",
    )
    return contract if accept_invalid else None
