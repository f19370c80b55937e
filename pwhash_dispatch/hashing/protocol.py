# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password type protocol."""

from typing import Callable, Protocol, runtime_checkable

from .result import ComparisonResult


@runtime_checkable
class PasswordType(Protocol):  # pragma: no cover
    """Protocol for pluggable password types.

    A password type owns the payload part of a stored hash
    (``:<name>:<payload>``). Implementations may raise
    :class:`~pwhash_dispatch.hashing.errors.PasswordFormatError`
    when a payload is malformed.
    """

    name: str

    def hash(self, plain: str) -> str:
        """Hash a plain text password.

        Parameters
        ----------
        plain : str
            The plain text password

        Returns
        -------
        str
            The payload to store after the type prefix
        """
        ...

    def compare(self, payload: str, plain: str) -> ComparisonResult:
        """Compare a stored payload with a plain text password.

        Parameters
        ----------
        payload : str
            The stored payload
        plain : str
            The plain text password

        Returns
        -------
        ComparisonResult
            Match, no-match or failure
        """
        ...

    def is_preferred_format(self, payload: str) -> bool:
        """Check if the payload was made with the current parameters.

        Parameters
        ----------
        payload : str
            The stored payload

        Returns
        -------
        bool
            True if the payload does not need a rehash
        """
        ...


PasswordTypeFactory = Callable[[str], PasswordType]
"""Builds a password type, given the name it is registered under."""


__all__ = ["PasswordType", "PasswordTypeFactory"]
