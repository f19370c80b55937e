# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt password type (type ``BC``)."""

import re
from dataclasses import dataclass

import bcrypt

from .errors import PasswordFormatError
from .result import ComparisonResult

_PAYLOAD_RE = re.compile(r"\$2[aby]\$(\d{2})\$[./A-Za-z0-9]{53}")


def _to_bytes(plain: str) -> bytes:
    # Explicitly truncate to 72 bytes for compatibility
    # ref (src):
    #  bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # This bug was corrected in the OpenBSD source by truncating
    # inputs to 72 bytes on the updated prefix $2b$,
    # but leaving $2a$ unchanged for compatibility.
    # Newer pyca/bcrypt releases reject longer inputs instead.
    return plain.encode("utf-8")[:72]


@dataclass(frozen=True)
class BcryptType:
    """Bcrypt password type, the payload is the bcrypt string."""

    name: str = "BC"
    rounds: int = 12

    @staticmethod
    def _cost(payload: str) -> int:
        m = _PAYLOAD_RE.fullmatch(payload)
        if not m:
            raise PasswordFormatError("Invalid bcrypt payload")
        return int(m.group(1))

    def hash(self, plain: str) -> str:
        """Hash password using bcrypt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The payload.
        """
        hashed = bcrypt.hashpw(_to_bytes(plain), bcrypt.gensalt(self.rounds))
        return hashed.decode("ascii")

    def compare(self, payload: str, plain: str) -> ComparisonResult:
        """Compare password against a bcrypt payload.

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
            If the payload is not a bcrypt hash.
        """
        self._cost(payload)
        try:
            matched = bcrypt.checkpw(_to_bytes(plain), payload.encode("ascii"))
        except ValueError as exc:
            raise PasswordFormatError(f"Invalid bcrypt payload: {exc}") from exc
        if matched:
            return ComparisonResult.match()
        return ComparisonResult.no_match()

    def is_preferred_format(self, payload: str) -> bool:
        """Check the cost factor of a payload.

        Parameters
        ----------
        payload : str
            The stored payload.

        Returns
        -------
        bool
            True if no rehash is needed.
        """
        return self._cost(payload) == self.rounds


__all__ = ["BcryptType"]
