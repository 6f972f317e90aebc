"""
HTTP message signatures for rewards grant requests.

Every request to a wallet-scoped endpoint carries:
    digest:    SHA-256=<base64 of SHA-256(body)>
    signature: keyId="<payment_id>",algorithm="secp256k1",
               headers="digest (request-target)",signature="<base64 DER>"

The signature covers the signing string
    digest: <digest>\n(request-target): <method> <path>

SECURITY: Signing FAILS CLOSED - a request that cannot be signed is
reported as such and must not be sent.
"""
import base64
import logging
import re
from typing import Optional

import httpx
from coincurve import PrivateKey

from ..models import RewardsWallet, UrlRequest
from .crypto import derive_signing_key, sha256_b64, sign_secp256k1, verify_secp256k1_signature

logger = logging.getLogger("request_signer")

SIGNATURE_ALGORITHM = "secp256k1"
SIGNED_HEADERS = ("digest", "(request-target)")

_SIGNATURE_RE = re.compile(r'(?P<key>[A-Za-z]+)="(?P<value>[^"]*)"')
# keyId is written into a quoted ASCII header value
_KEY_ID_RE = re.compile(r'[\x20-\x7e]+')


def _request_target(request: UrlRequest) -> Optional[str]:
    try:
        url = httpx.URL(request.url)
    except httpx.InvalidURL:
        return None
    if not url.is_absolute_url:
        return None
    return f"{request.method.value.lower()} {url.raw_path.decode('ascii')}"


def _signing_string(digest: str, request_target: str) -> str:
    return f"digest: {digest}\n(request-target): {request_target}"


def parse_signature_header(value: str) -> dict[str, str]:
    """Split a signature header into its quoted key/value parameters."""
    return {m.group("key"): m.group("value") for m in _SIGNATURE_RE.finditer(value or "")}


class RequestSigner:
    def __init__(self, key_id: str, private_key: PrivateKey):
        self.key_id = key_id
        self._private_key = private_key

    @classmethod
    def from_wallet(cls, wallet: RewardsWallet) -> Optional["RequestSigner"]:
        """Returns None if the wallet has no usable signing credentials."""
        if not wallet.payment_id:
            logger.error("Wallet has no payment id")
            return None
        if not _KEY_ID_RE.fullmatch(wallet.payment_id) or '"' in wallet.payment_id:
            logger.error(f"Payment id is not usable as a key id: {wallet.payment_id!r}")
            return None
        try:
            private_key = derive_signing_key(wallet.recovery_seed)
        except ValueError as e:
            logger.error(f"Invalid wallet signing key: {e}")
            return None
        return cls(wallet.payment_id, private_key)

    def sign_request(self, request: UrlRequest) -> bool:
        """
        Add digest and signature headers to the request in place.

        Returns False, leaving the request unchanged, if the request URL
        is empty or not absolute.
        """
        request_target = _request_target(request)
        if not request_target:
            logger.error(f"Cannot sign request with URL {request.url!r}")
            return False

        digest = f"SHA-256={sha256_b64(request.content)}"
        message = _signing_string(digest, request_target).encode("utf-8")
        signature = base64.b64encode(sign_secp256k1(message, self._private_key)).decode("ascii")

        request.headers["digest"] = digest
        request.headers["signature"] = (
            f'keyId="{self.key_id}",'
            f'algorithm="{SIGNATURE_ALGORITHM}",'
            f'headers="{" ".join(SIGNED_HEADERS)}",'
            f'signature="{signature}"'
        )
        request.headers["accept"] = "application/json"
        return True

    @staticmethod
    def verify(request: UrlRequest, pubkey_hex: str) -> bool:
        """Check a signed request against a public key. Fails closed."""
        digest = request.headers.get("digest")
        params = parse_signature_header(request.headers.get("signature", ""))
        request_target = _request_target(request)
        if not digest or not request_target or "signature" not in params:
            return False
        if params.get("algorithm") != SIGNATURE_ALGORITHM:
            return False
        if digest != f"SHA-256={sha256_b64(request.content)}":
            return False
        try:
            signature = base64.b64decode(params["signature"], validate=True)
        except ValueError:
            return False

        message = _signing_string(digest, request_target).encode("utf-8")
        is_valid, reason = verify_secp256k1_signature(message, pubkey_hex, signature)
        if not is_valid:
            logger.warning(f"Signature rejected: {reason}")
        return is_valid
