"""Runtime helpers for http-signature-crypto"""

from .errors import SignatureCryptoError
from .codec import encode_base64, decode_base64, encode_base58, decode_base58
from .completion import callbackify

__all__ = [
    "SignatureCryptoError",
    "encode_base64",
    "decode_base64",
    "encode_base58",
    "decode_base58",
    "callbackify"
]
