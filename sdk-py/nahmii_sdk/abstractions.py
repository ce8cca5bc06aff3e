"""
Contract abstractions: bundled deployment descriptors per chain family

A bundle is a directory of `<ContractName>.json` files, each holding
`{"networks": {"<chain id>": {"address": ...}}, "abi": [...]}`.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import settings
from .errors import (
    ContractNotFoundError,
    MalformedDeploymentError,
    UnknownNetworkError,
)

SUPPORTED_NETWORKS = ("homestead", "ropsten")

CHAIN_NETWORK_NAMES = {
    1: "homestead",
    3: "ropsten",
}

CONTRACT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def network_name_for(network) -> str:
    """Map a connected network to the name of its chain family."""
    try:
        chain_id = int(network.chain_id)
    except (TypeError, ValueError):
        return network.name
    return CHAIN_NETWORK_NAMES.get(chain_id, network.name)


@dataclass(frozen=True)
class DeploymentDescriptor:
    contract_name: str
    networks: Dict[str, Dict[str, Any]]
    abi: List[Dict[str, Any]]

    def address_for(self, chain_id: Union[int, str]) -> str:
        """Deployed address of the contract on chain_id."""
        entry = self.networks.get(str(chain_id))
        if not isinstance(entry, dict) or "address" not in entry:
            raise MalformedDeploymentError(
                f"No deployment of {self.contract_name} on network id {chain_id}"
            )
        return entry["address"]

    @staticmethod
    def from_dict(contract_name: str, d: Any) -> "DeploymentDescriptor":
        if not isinstance(d, dict):
            raise MalformedDeploymentError(f"Deployment of {contract_name} is not an object")
        networks = d.get("networks")
        abi = d.get("abi")
        if not isinstance(networks, dict) or not isinstance(abi, list):
            raise MalformedDeploymentError(
                f"Deployment of {contract_name} lacks networks or abi"
            )
        return DeploymentDescriptor(contract_name=contract_name, networks=networks, abi=abi)


class DeploymentBundle:
    """Deployment descriptors of one chain family, loaded on first use."""

    def __init__(self, network_name: str, directory: Path):
        self.network_name = network_name
        self.directory = Path(directory)
        self._cache: Dict[str, DeploymentDescriptor] = {}

    def get(self, contract_name: str) -> DeploymentDescriptor:
        if contract_name in self._cache:
            return self._cache[contract_name]

        if not CONTRACT_NAME_PATTERN.match(contract_name or ""):
            raise ContractNotFoundError(f"Unable to find module for contract {contract_name!r}")

        path = self.directory / f"{contract_name}.json"
        if not path.is_file():
            raise ContractNotFoundError(
                f"Unable to find module for contract {contract_name!r} on {self.network_name}"
            )

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedDeploymentError(f"Unreadable deployment {path}: {e}") from e

        descriptor = DeploymentDescriptor.from_dict(contract_name, data)
        self._cache[contract_name] = descriptor
        return descriptor


class DeploymentRegistry:
    """Deployment bundles keyed by chain family name."""

    def __init__(self, bundles: Mapping[str, DeploymentBundle]):
        self._bundles = dict(bundles)

    @staticmethod
    def from_directory(root: Union[str, Path]) -> "DeploymentRegistry":
        root = Path(root)
        return DeploymentRegistry(
            {name: DeploymentBundle(name, root / name) for name in SUPPORTED_NETWORKS}
        )

    def get(self, network_name: str, contract_name: str) -> DeploymentDescriptor:
        bundle = self._bundles.get(network_name)
        if bundle is None:
            raise UnknownNetworkError(f"Unknown network name: {network_name}")
        return bundle.get(contract_name)


_default_registry: Optional[DeploymentRegistry] = None


def default_registry() -> DeploymentRegistry:
    """Registry over the configured deployments directory."""
    global _default_registry
    if _default_registry is None:
        _default_registry = DeploymentRegistry.from_directory(settings.deployments_dir)
    return _default_registry


def get(network_name: str, contract_name: str) -> DeploymentDescriptor:
    return default_registry().get(network_name, contract_name)
