"""
http-signature-crypto

Uniform sign/verify facade over RSA, Ed25519 and HMAC. Callers name an
algorithm and pass its key material; the registry picks the provider and
the dispatcher normalizes awaitable and callback completion styles.
"""

from .config import DispatcherConfig
from .registry import AlgorithmRegistry
from .dispatcher import Dispatcher, get_default_dispatcher, sign, verify, use
from .algorithms import (
    AlgorithmProvider, SignRequest, VerifyRequest,
    Ed25519Provider, HmacProvider, RsaProvider,
    generate_ed25519_key_pair, generate_rsa_key_pair,
)
from .runtime.errors import *

__version__ = "1.0.0"
__all__ = [
    # Entry points
    "sign",
    "verify",
    "use",
    "get_default_dispatcher",

    # Core
    "Dispatcher",
    "DispatcherConfig",
    "AlgorithmRegistry",

    # Providers
    "AlgorithmProvider",
    "SignRequest",
    "VerifyRequest",
    "Ed25519Provider",
    "HmacProvider",
    "RsaProvider",
    "generate_ed25519_key_pair",
    "generate_rsa_key_pair",

    # Errors
    "ErrorCode",
    "SignatureCryptoError",
    "UnknownAlgorithmError",
    "InvalidRequestError",
    "InvalidProviderError",
    "UnsupportedDigestError",
    "MalformedInputError",
    "ErrorHandler",
]
