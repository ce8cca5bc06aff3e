"""
Provider for a nahmii cluster and the Ethereum node behind it
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests
from web3 import Web3

from .abstractions import CHAIN_NETWORK_NAMES
from .config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Network:
    chain_id: Union[int, str]
    name: str


class NahmiiProvider:
    """
    Access to the cluster API (over HTTPS) and the Ethereum node (over web3).

    Args:
        api_root: Host name of the cluster API, or a full base URL
        web3: Web3 instance connected to the cluster's Ethereum node
        operator_address: Address of the exchange operator sealing receipts
        timeout: Timeout in seconds for cluster API requests
        session: requests session to issue cluster API requests with
    """

    def __init__(
        self,
        api_root: str,
        web3: Web3,
        operator_address: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        if "://" not in api_root:
            api_root = f"https://{api_root}"
        self.api_url = api_root.rstrip("/")
        self.web3 = web3
        self.operator_address = operator_address
        self.timeout = timeout
        self._session = session or requests.Session()
        self._network: Optional[Network] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "NahmiiProvider":
        return cls(
            settings.api_root,
            Web3(Web3.HTTPProvider(settings.node_url)),
            operator_address=settings.operator_address,
            timeout=settings.request_timeout_seconds,
        )

    @property
    def network(self) -> Network:
        """The connected network, queried from the node once."""
        if self._network is None:
            chain_id = self.web3.eth.chain_id
            self._network = Network(
                chain_id=chain_id,
                name=CHAIN_NETWORK_NAMES.get(chain_id, "unknown"),
            )
        return self._network

    def get_cluster_information(self) -> Dict[str, Any]:
        """Fetch the cluster's network name and contract address registry."""
        url = f"{self.api_url}/"
        logger.debug("Fetching cluster information from %s", url)
        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_code(self, address: str) -> str:
        """Deployed bytecode at address as hex, '0x' when there is none."""
        logger.debug("Fetching code at %s", address)
        code = self.web3.eth.get_code(Web3.to_checksum_address(address))
        return Web3.to_hex(code)
