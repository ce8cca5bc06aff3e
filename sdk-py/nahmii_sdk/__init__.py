"""
nahmii SDK v0.1
Client primitives for the nahmii settlement layer

Sealing: canonical hashing, payments, receipts
Contracts: deployment resolution and validation
"""

from .canonical import canonicalize, hash_object, hash_values, resolve_path
from .crypto import Signature, eth_hash, generate_keypair, recover_address, sign, verify
from .seal import Seal, is_sealed_by, seal_record

# Sealing
from .monetary_amount import Currency, MonetaryAmount
from .payment import PAYMENT_HASHED_PROPERTIES, Payment
from .receipt import RECEIPT_HASHED_PROPERTIES, PartyState, Receipt

# Contracts
from .abstractions import (
    DeploymentBundle,
    DeploymentDescriptor,
    DeploymentRegistry,
    network_name_for,
)
from .contract import NahmiiContract
from .null_settlement import NullSettlementContract
from .provider import NahmiiProvider, Network
from .wallet import Wallet

from .config import Settings, settings
from .errors import (
    NahmiiError,
    ResolutionError,
    UnknownNetworkError,
    ContractNotFoundError,
    MalformedDeploymentError,
)

__version__ = "0.1.0"
__all__ = [
    # Canonical & Crypto
    "canonicalize",
    "hash_object",
    "hash_values",
    "resolve_path",
    "Signature",
    "eth_hash",
    "generate_keypair",
    "recover_address",
    "sign",
    "verify",
    "Seal",
    "is_sealed_by",
    "seal_record",
    # Sealing
    "Currency",
    "MonetaryAmount",
    "PAYMENT_HASHED_PROPERTIES",
    "Payment",
    "RECEIPT_HASHED_PROPERTIES",
    "PartyState",
    "Receipt",
    # Contracts
    "DeploymentBundle",
    "DeploymentDescriptor",
    "DeploymentRegistry",
    "network_name_for",
    "NahmiiContract",
    "NullSettlementContract",
    "NahmiiProvider",
    "Network",
    "Wallet",
    # Config & errors
    "Settings",
    "settings",
    "NahmiiError",
    "ResolutionError",
    "UnknownNetworkError",
    "ContractNotFoundError",
    "MalformedDeploymentError",
]
