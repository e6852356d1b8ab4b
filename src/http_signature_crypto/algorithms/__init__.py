"""
Algorithm providers.

Each built-in provider is a thin adapter over the ``cryptography`` library.
"""

from typing import Callable, Dict

from .provider import AlgorithmProvider, SignRequest, VerifyRequest, validate_provider
from .digests import resolve_digest, supported_digests
from .ed25519 import Ed25519Provider, generate_ed25519_key_pair
from .hmac import HmacProvider
from .rsa import RsaProvider, generate_rsa_key_pair


# Built-in provider factories by algorithm name
BUILTIN_PROVIDERS: Dict[str, Callable[[], AlgorithmProvider]] = {
    "ed25519": Ed25519Provider,
    "hmac": HmacProvider,
    "rsa": RsaProvider,
}


def get_builtin_algorithms():
    """Get list of built-in algorithm names."""
    return list(BUILTIN_PROVIDERS.keys())


__all__ = [
    "AlgorithmProvider",
    "SignRequest",
    "VerifyRequest",
    "validate_provider",
    "resolve_digest",
    "supported_digests",
    "Ed25519Provider",
    "HmacProvider",
    "RsaProvider",
    "BUILTIN_PROVIDERS",
    "get_builtin_algorithms",
    "generate_ed25519_key_pair",
    "generate_rsa_key_pair",
]
