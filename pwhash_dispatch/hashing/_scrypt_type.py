# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501

"""Salted scrypt password type (type ``A``)."""

import base64
import binascii
import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass
from typing import Tuple

from .errors import PasswordFormatError
from .result import ComparisonResult

_PAYLOAD_RE = re.compile(
    r"(\d+)\$(\d+)\$(\d+)\$([A-Za-z0-9+/=]+)\$([A-Za-z0-9+/=]+)"
)
# same limits as the settings accept
MAX_N = 2**20
MAX_R = 32
MAX_P = 16


@dataclass(frozen=True)
class ScryptType:
    """Scrypt password type.

    Payload: ``<n>$<r>$<p>$<b64 salt>$<b64 key>``.
    """

    name: str = "A"
    n: int = 16384  # 2^14
    r: int = 8
    p: int = 1
    dklen: int = 64
    salt_len: int = 16

    @staticmethod
    def _derive(
        plain: str, salt: bytes, n: int, r: int, p: int, dklen: int
    ) -> bytes:
        return hashlib.scrypt(
            plain.encode("utf-8"),
            salt=salt,
            n=n,
            r=r,
            p=p,
            dklen=dklen,
            maxmem=256 * r * n + 1024 * 1024,
        )

    @staticmethod
    def _decode(payload: str) -> Tuple[int, int, int, bytes, bytes]:
        m = _PAYLOAD_RE.fullmatch(payload)
        if not m:
            raise PasswordFormatError("Invalid scrypt payload")
        n, r, p = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if not 2 <= n <= MAX_N or n & (n - 1):
            raise PasswordFormatError(f"Invalid scrypt cost: {n}")
        if not 1 <= r <= MAX_R or not 1 <= p <= MAX_P:
            raise PasswordFormatError("Invalid scrypt block size or parallelism")
        try:
            salt = base64.b64decode(m.group(4).encode("ascii"), validate=True)
            key = base64.b64decode(m.group(5).encode("ascii"), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise PasswordFormatError("Invalid scrypt salt or key") from exc
        return n, r, p, salt, key

    def hash(self, plain: str) -> str:
        """Hash password using scrypt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The payload.
        """
        salt = secrets.token_bytes(self.salt_len)
        key = self._derive(plain, salt, self.n, self.r, self.p, self.dklen)
        # pylint: disable=inconsistent-quotes
        return (
            f"{self.n}${self.r}${self.p}$"
            f"{base64.b64encode(salt).decode('ascii')}$"
            f"{base64.b64encode(key).decode('ascii')}"
        )

    def compare(self, payload: str, plain: str) -> ComparisonResult:
        """Compare password against a scrypt payload.

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
            If the payload is not a valid scrypt payload.
        """
        n, r, p, salt, stored_key = self._decode(payload)
        try:
            key = self._derive(plain, salt, n, r, p, len(stored_key))
        except (ValueError, OverflowError, TypeError) as exc:
            raise PasswordFormatError(f"Invalid scrypt parameters: {exc}") from exc
        if hmac.compare_digest(key, stored_key):
            return ComparisonResult.match()
        return ComparisonResult.no_match()

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
        """
        n, r, p, _, stored_key = self._decode(payload)
        return (
            n == self.n
            and r == self.r
            and p == self.p
            and len(stored_key) == self.dklen
        )


__all__ = ["ScryptType"]
