# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2id password type (type ``B``)."""

from dataclasses import dataclass, field

from argon2 import PasswordHasher
from argon2.exceptions import (
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from .errors import PasswordFormatError
from .result import ComparisonResult


@dataclass(frozen=True)
class Argon2Type:
    """Argon2 password type.

    The payload is the PHC string produced by ``argon2-cffi``.
    """

    _ph: PasswordHasher = field(init=False, repr=False, compare=False)

    name: str = "B"
    time_cost: int = 2
    memory_cost: int = 65536  # 64 MiB
    parallelism: int = 1
    hash_len: int = 32
    salt_len: int = 16

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_ph",
            PasswordHasher(
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                salt_len=self.salt_len,
            ),
        )

    def hash(self, plain: str) -> str:
        """Hash password using argon2.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The payload.
        """
        return self._ph.hash(plain)

    def compare(self, payload: str, plain: str) -> ComparisonResult:
        """Compare password against an argon2 payload.

        Parameters
        ----------
        payload : str
            The stored payload.
        plain : str
            The plain secret to check.

        Returns
        -------
        ComparisonResult
            Match or no-match.

        Raises
        ------
        PasswordFormatError
            If the payload is not a valid argon2 hash.
        """
        if not payload.startswith("$argon2"):
            raise PasswordFormatError("Invalid argon2 payload")
        try:
            self._ph.verify(payload, plain)
        except VerifyMismatchError:
            return ComparisonResult.no_match()
        except (InvalidHashError, VerificationError) as exc:
            raise PasswordFormatError(f"Invalid argon2 payload: {exc}") from exc
        return ComparisonResult.match()

    def is_preferred_format(self, payload: str) -> bool:
        """Check if the payload uses the current parameters.

        Parameters
        ----------
        payload : str
            The stored payload.

        Returns
        -------
        bool
            True if no rehash is needed.

        Raises
        ------
        PasswordFormatError
            If the payload is not a valid argon2 hash.
        """
        if not payload.startswith("$argon2"):
            raise PasswordFormatError("Invalid argon2 payload")
        try:
            return not self._ph.check_needs_rehash(payload)
        except (InvalidHashError, ValueError) as exc:
            raise PasswordFormatError(f"Invalid argon2 payload: {exc}") from exc


__all__ = ["Argon2Type"]
