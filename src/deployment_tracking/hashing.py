"""Deterministic key derivation for the tracking database."""

import hashlib
from typing import Sequence, Union

from eth_utils import decode_hex, is_hex

BLOCK_HASH_SIZE = 32


def to_block_hash_bytes(block_hash: Union[bytes, str]) -> bytes:
    """
    Convert a block hash to its raw 32 bytes.

    Args:
        block_hash: Raw bytes or 0x-prefixed hex string

    Returns:
        32-byte block hash

    Raises:
        ValueError: If the value is not a 32-byte hash in bytes or hex form
    """
    if isinstance(block_hash, str):
        if not is_hex(block_hash):
            raise ValueError(f"Block hash is not a hex string: {block_hash!r}")
        raw = decode_hex(block_hash)
    elif isinstance(block_hash, (bytes, bytearray, memoryview)):
        raw = bytes(block_hash)
    else:
        raise ValueError(
            f"Block hash must be bytes or a hex string, got {type(block_hash).__name__}"
        )

    if len(raw) != BLOCK_HASH_SIZE:
        raise ValueError(
            f"Block hash must be {BLOCK_HASH_SIZE} bytes, got {len(raw)}"
        )
    return raw


def derive_chain_key(block_hash: Union[bytes, str]) -> str:
    """
    Derive the chain key for a block hash.

    Args:
        block_hash: Raw bytes or 0x-prefixed hex string

    Returns:
        "0x" + lowercase hex SHA3-256 digest of the raw block hash bytes
    """
    digest = hashlib.sha3_256(to_block_hash_bytes(block_hash))
    return "0x" + digest.hexdigest()


def derive_contract_key(name: str, byte_code: str, args: Sequence[str]) -> str:
    """
    Derive the contract key for a built contract.

    Name, bytecode and the constructor arguments are hashed back to back with
    no separators. Arguments are joined the same way, so ["ab", "c"] and
    ["a", "bc"] produce the same key. Existing tracking files depend on this.

    Args:
        name: Contract name
        byte_code: Contract bytecode as produced by the compiler
        args: Constructor arguments

    Returns:
        "0x" + lowercase hex SHA3-256 digest
    """
    hasher = hashlib.sha3_256()
    hasher.update(name.encode("utf-8"))
    hasher.update(byte_code.encode("utf-8"))
    hasher.update("".join(args).encode("utf-8"))
    return "0x" + hasher.hexdigest()
