"""
Seals: a canonical digest of a record plus a signature over that digest
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .canonical import JsonValue, hash_object
from .crypto import PrivateKeyLike, Signature, eth_hash, sign, verify


@dataclass
class Seal:
    hash: str
    signature: Signature

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "signature": self.signature.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Seal":
        return Seal(
            hash=d.get("hash"),
            signature=Signature.from_dict(d.get("signature") or {}),
        )


def seal_record(
    record: JsonValue, paths: Iterable[str], private_key: PrivateKeyLike
) -> Seal:
    """Hash the record over paths and sign the Ethereum message hash of it."""
    record_hash = hash_object(record, paths)
    return Seal(hash=record_hash, signature=sign(eth_hash(record_hash), private_key))


def is_sealed_by(
    record: JsonValue, paths: Iterable[str], seal: Seal, address: str
) -> bool:
    """
    Check a seal against the current state of a record.

    The digest is recomputed first so that any change to a hashed property
    is detected before the signer is checked.
    """
    if hash_object(record, paths) != seal.hash:
        return False
    return verify(eth_hash(seal.hash), seal.signature, address)
