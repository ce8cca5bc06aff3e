"""
SDK settings with environment variable support
"""

import os
from pathlib import Path
from typing import Optional

DEFAULT_DEPLOYMENTS_DIR = Path(__file__).parent / "deployments"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class Settings:
    """Settings read once from the environment at construction."""

    def __init__(self):
        self.api_root: str = os.getenv("NAHMII_API_ROOT", "api.nahmii.io")
        self.node_url: str = os.getenv("NAHMII_NODE_URL", "http://localhost:8545")
        self.operator_address: Optional[str] = os.getenv("NAHMII_OPERATOR_ADDRESS") or None
        self.deployments_dir: Path = Path(
            os.getenv("NAHMII_DEPLOYMENTS_DIR", str(DEFAULT_DEPLOYMENTS_DIR))
        )
        self.request_timeout_seconds: int = int(
            os.getenv("NAHMII_REQUEST_TIMEOUT_SECONDS", "30")
        )
        # Keep handles to contracts that fail validation instead of dropping them
        self.accept_invalid_contracts: bool = _env_flag("ACCEPT_INVALID_CONTRACTS")


settings = Settings()
