# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing errors."""

from .result import FailureReason


class PasswordError(Exception):
    """Base class for password hashing errors."""


class HashParseError(PasswordError):
    """A stored hash could not be parsed or its type resolved."""

    reason: FailureReason = FailureReason.INVALID_FORMAT


class InvalidFormatError(HashParseError):
    """The stored hash is not of the ``:<type>:<payload>`` form."""

    reason = FailureReason.INVALID_FORMAT


class UnknownTypeError(HashParseError):
    """The stored hash references an unregistered password type."""

    reason = FailureReason.UNKNOWN_TYPE


class InvalidImplementationError(UnknownTypeError):
    """A registered factory did not produce a usable password type.

    The type counts as unknown; ``reason`` still tells the two apart.
    """

    reason = FailureReason.INVALID_IMPLEMENTATION


class PasswordFormatError(PasswordError):
    """A password type could not read its own payload."""

    reason = FailureReason.DELEGATED_FORMAT


class TypeUnavailableError(PasswordError):
    """No usable implementation for the requested password type."""


class PreferredTypeUnavailable(TypeUnavailableError):
    """The preferred password type cannot be used to create hashes."""


__all__ = [
    "PasswordError",
    "HashParseError",
    "InvalidFormatError",
    "UnknownTypeError",
    "InvalidImplementationError",
    "PasswordFormatError",
    "TypeUnavailableError",
    "PreferredTypeUnavailable",
]
