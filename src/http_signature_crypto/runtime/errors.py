"""
Signature Crypto Error Model

This module provides the error taxonomy for the signing/verification facade.
The dispatcher synthesizes only the unknown-algorithm case; everything else
is raised by a provider and passed through to the caller untouched.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for signature crypto failures."""

    # General errors (1-99)
    UNKNOWN = 1

    # Dispatch errors (100-199)
    UNKNOWN_ALGORITHM = 100
    INVALID_REQUEST = 101
    INVALID_PROVIDER = 102

    # Provider errors (200-299)
    UNSUPPORTED_DIGEST = 200
    MALFORMED_INPUT = 201


class SignatureCryptoError(Exception):
    """
    Base class for all signature crypto errors.

    Carries structured error information alongside the message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a signature crypto error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, code={self.code.name})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class UnknownAlgorithmError(SignatureCryptoError):
    """No provider is registered under the requested algorithm name."""

    def __init__(self, algorithm: Any):
        super().__init__(
            f"Unknown algorithm '{algorithm}'.",
            ErrorCode.UNKNOWN_ALGORITHM,
            {"algorithm": algorithm},
        )
        self.algorithm = algorithm


class InvalidRequestError(SignatureCryptoError):
    """A sign/verify request could not be parsed into its request model."""

    def __init__(self, message: str = "Invalid request",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_REQUEST, details, cause)


class InvalidProviderError(SignatureCryptoError, TypeError):
    """An object registered as a provider lacks the sign/verify capability set."""

    def __init__(self, message: str = "Invalid algorithm provider",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_PROVIDER, details, cause)


class UnsupportedDigestError(SignatureCryptoError):
    """The requested hash type is not a digest the crypto library recognizes."""

    def __init__(self, message: str = "Unknown message digest",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_DIGEST, details, cause)


class MalformedInputError(SignatureCryptoError):
    """Key or signature material that prevents the operation from running."""

    def __init__(self, message: str = "Malformed input",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MALFORMED_INPUT, details, cause)


class ErrorHandler:
    """
    Utility class for handling and categorizing errors.
    """

    @staticmethod
    def is_provider_error(error: Exception) -> bool:
        """
        Check whether an error originated inside a provider.

        Args:
            error: Exception to check

        Returns:
            True unless the error was synthesized by the dispatch layer
        """
        if isinstance(error, SignatureCryptoError):
            return error.code not in (ErrorCode.UNKNOWN_ALGORITHM,
                                      ErrorCode.INVALID_REQUEST,
                                      ErrorCode.INVALID_PROVIDER)
        return True


__all__ = [
    "ErrorCode",
    "SignatureCryptoError",
    "UnknownAlgorithmError",
    "InvalidRequestError",
    "InvalidProviderError",
    "UnsupportedDigestError",
    "MalformedInputError",
    "ErrorHandler",
]
