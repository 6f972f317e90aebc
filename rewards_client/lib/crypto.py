"""
Cryptographic utilities for signing rewards requests.

SECURITY: All verification functions FAIL CLOSED - they return False
on any malformed key or signature. No silent degradation.
"""
import base64
import hashlib
import logging

from coincurve import PrivateKey, PublicKey

logger = logging.getLogger(__name__)


def sha256_hex(data: str | bytes) -> str:
    """Compute SHA-256 hash and return as hex string."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def sha256_bytes(data: bytes) -> bytes:
    """Compute SHA-256 hash and return as bytes."""
    return hashlib.sha256(data).digest()


def sha256_b64(data: str | bytes) -> str:
    """Compute SHA-256 hash and return as standard base64."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(sha256_bytes(data)).decode("ascii")


def derive_signing_key(recovery_seed: bytes) -> PrivateKey:
    """
    Derive the wallet's secp256k1 signing key from its recovery seed.

    The secret is SHA-256(seed). Raises ValueError for an empty seed or
    a secret outside the curve order.
    """
    if not recovery_seed:
        raise ValueError("Recovery seed is empty")
    return PrivateKey(sha256_bytes(recovery_seed))


def public_key_hex(recovery_seed: bytes) -> str:
    """Compressed public key (33 bytes, hex) for a recovery seed."""
    return derive_signing_key(recovery_seed).public_key.format(compressed=True).hex()


def sign_secp256k1(message: bytes, private_key: PrivateKey) -> bytes:
    """Sign SHA-256(message); returns a DER-encoded signature."""
    return private_key.sign(message)


def verify_secp256k1_signature(
    message: bytes,
    pubkey_hex: str,
    signature: bytes,
) -> tuple[bool, str]:
    """
    Verify a DER-encoded secp256k1 signature over SHA-256(message).

    Args:
        message: The raw message bytes that were signed
        pubkey_hex: Hex-encoded public key (33 bytes compressed or 65 bytes uncompressed)
        signature: DER-encoded signature bytes

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        pubkey_bytes = bytes.fromhex(pubkey_hex)
        if len(pubkey_bytes) not in (33, 65):
            return False, f"Invalid public key length: {len(pubkey_bytes)} (expected 33 or 65)"

        pubkey = PublicKey(pubkey_bytes)

        if pubkey.verify(signature, message):
            return True, "Signature verified"
        return False, "Signature verification failed"

    except ValueError as e:
        return False, f"Invalid key or signature format: {e}"
