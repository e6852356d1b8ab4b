"""
HMAC provider.

The shared key and plaintext are UTF-8 text; the MAC is base64 text.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hmac

from ..runtime.codec import decode_base64, encode_base64, to_utf8
from .digests import resolve_digest
from .provider import AlgorithmProvider, SignRequest, VerifyRequest, require_field


class HmacProvider(AlgorithmProvider):
    """HMAC over the digest named by ``hashType``."""

    def _mac(self, request) -> hmac.HMAC:
        algorithm = resolve_digest(request.hash_type)
        key = to_utf8(require_field(request, "shared_key", "sharedKey"), "sharedKey")
        mac = hmac.HMAC(key, algorithm)
        mac.update(to_utf8(require_field(request, "plaintext", "plaintext"), "plaintext"))
        return mac

    def sign(self, request: SignRequest) -> str:
        return encode_base64(self._mac(request).finalize())

    def verify(self, request: VerifyRequest) -> bool:
        mac = self._mac(request)
        signature = decode_base64(request.signature)
        try:
            mac.verify(signature)
            return True
        except InvalidSignature:
            return False


__all__ = ["HmacProvider"]
