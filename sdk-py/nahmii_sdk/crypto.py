"""
Cryptographic primitives: secp256k1 + keccak256
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from eth_account import Account
from eth_keys import keys
from eth_keys.exceptions import BadSignature
from eth_utils import (
    ValidationError,
    decode_hex,
    encode_hex,
    is_hex_address,
    keccak,
)

ETH_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n32"

PrivateKeyLike = Union[str, bytes, keys.PrivateKey]


@dataclass
class Signature:
    v: int
    r: str
    s: str

    def to_dict(self) -> Dict[str, Any]:
        return {"v": self.v, "r": self.r, "s": self.s}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Signature":
        return Signature(v=d.get("v"), r=d.get("r"), s=d.get("s"))


def hash(data: bytes) -> str:
    """Compute keccak256 hash of data, return 0x-prefixed hex string."""
    return encode_hex(keccak(data))


def eth_hash(message_hash: str) -> str:
    """Hash a 32 byte message hash the way Ethereum signed messages are hashed."""
    return hash(ETH_MESSAGE_PREFIX + decode_hex(message_hash))


def generate_keypair() -> Tuple[str, str]:
    """Generate secp256k1 keypair, return (private_key_hex, address)."""
    account = Account.create()
    return encode_hex(account.key), account.address


def _private_key(private_key: PrivateKeyLike) -> keys.PrivateKey:
    if isinstance(private_key, keys.PrivateKey):
        return private_key
    if isinstance(private_key, str):
        private_key = decode_hex(private_key)
    return keys.PrivateKey(bytes(private_key))


def sign(message_hash: str, private_key: PrivateKeyLike) -> Signature:
    """Sign a 32 byte message hash, return the (v, r, s) signature."""
    signature = _private_key(private_key).sign_msg_hash(decode_hex(message_hash))
    return Signature(
        v=signature.v + 27,
        r=f"0x{signature.r:064x}",
        s=f"0x{signature.s:064x}",
    )


def recover_address(message_hash: str, signature: Signature) -> str:
    """Recover the checksummed address that produced signature."""
    v = int(signature.v)
    if v >= 27:
        v -= 27
    vrs = (v, int(signature.r, 16), int(signature.s, 16))
    public_key = keys.Signature(vrs=vrs).recover_public_key_from_msg_hash(
        decode_hex(message_hash)
    )
    return public_key.to_checksum_address()


def verify(message_hash: str, signature: Signature, address: str) -> bool:
    """Verify that signature over message_hash was made by address."""
    if not is_hex_address(address):
        return False
    try:
        recovered = recover_address(message_hash, signature)
    except (BadSignature, ValidationError, ValueError, TypeError, AttributeError):
        return False
    return recovered.lower() == address.lower()
