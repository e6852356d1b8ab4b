"""
Base algorithm provider interface.

Defines the sign/verify capability set every algorithm implementation
must satisfy, and the request models handed to it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..runtime.errors import InvalidProviderError, MalformedInputError


class SignRequest(BaseModel):
    """
    A request to sign plaintext.

    Only ``algorithm`` is required; each provider reads the fields it needs
    and ignores the rest.
    """
    algorithm: str = Field(description="Registered algorithm name")
    hash_type: Optional[str] = Field(default=None, alias="hashType")
    plaintext: Optional[str] = Field(default=None)
    private_key_pem: Optional[str] = Field(default=None, alias="privateKeyPem")
    private_key_base58: Optional[str] = Field(default=None, alias="privateKeyBase58")
    shared_key: Optional[str] = Field(default=None, alias="sharedKey")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class VerifyRequest(BaseModel):
    """A request to verify a signature over plaintext."""
    algorithm: str = Field(description="Registered algorithm name")
    hash_type: Optional[str] = Field(default=None, alias="hashType")
    plaintext: Optional[str] = Field(default=None)
    public_key_pem: Optional[str] = Field(default=None, alias="publicKeyPem")
    public_key_base58: Optional[str] = Field(default=None, alias="publicKeyBase58")
    shared_key: Optional[str] = Field(default=None, alias="sharedKey")
    signature: Optional[str] = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class AlgorithmProvider(ABC):
    """
    Base provider interface.

    Implementations hold no per-call state. Either method may be a plain
    function or a coroutine function; the dispatcher handles both.
    """

    @abstractmethod
    def sign(self, request: SignRequest) -> str:
        """
        Sign the request's plaintext.

        Args:
            request: Sign request

        Returns:
            Signature text (base64 for all built-in providers)

        Raises:
            UnsupportedDigestError: If the hash type is not recognized
            MalformedInputError: If key material cannot be decoded
        """
        pass

    @abstractmethod
    def verify(self, request: VerifyRequest) -> bool:
        """
        Verify the request's signature.

        Args:
            request: Verify request

        Returns:
            True if the signature matches, False if it is well formed but
            does not match

        Raises:
            UnsupportedDigestError: If the hash type is not recognized
            MalformedInputError: If key or signature encoding is invalid
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def validate_provider(provider: Any) -> Any:
    """
    Check that an object carries the provider capability set.

    Args:
        provider: Object to register as a provider

    Returns:
        The provider, unchanged

    Raises:
        InvalidProviderError: If ``sign`` or ``verify`` is missing or not callable
    """
    missing = [name for name in ("sign", "verify")
               if not callable(getattr(provider, name, None))]
    if missing:
        raise InvalidProviderError(
            f"{type(provider).__name__} is not an algorithm provider: "
            f"missing callable {', '.join(missing)}",
            {"missing": missing},
        )
    return provider


def require_field(request: BaseModel, field: str, alias: str) -> Any:
    """
    Fetch a field a provider cannot work without.

    Raises:
        MalformedInputError: If the field is unset
    """
    value = getattr(request, field)
    if value is None:
        raise MalformedInputError(
            f"Algorithm '{request.algorithm}' requires '{alias}'.",
            {"field": alias},
        )
    return value


__all__ = [
    "AlgorithmProvider",
    "SignRequest",
    "VerifyRequest",
    "validate_provider",
    "require_field",
]
