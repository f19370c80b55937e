# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501

"""Keyed PBKDF2-HMAC password type (type ``PBKHM``)."""

import base64
import binascii
import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass, field
from typing import Tuple

from .errors import PasswordFormatError
from .result import ComparisonResult

_PAYLOAD_RE = re.compile(
    r"([a-z0-9_]+)\$(\d+)\$([A-Za-z0-9+/=]+)\$([A-Za-z0-9+/=]+)"
)
# digests both hmac.new and hashlib.pbkdf2_hmac accept
DIGESTS = ("sha1", "sha224", "sha256", "sha384", "sha512")
MAX_ITERATIONS = 10_000_000


@dataclass(frozen=True)
class Pbkdf2HmacType:
    """PBKDF2 over an HMAC of the password keyed with the site secret.

    Payload: ``<digest>$<iterations>$<b64 salt>$<b64 key>``.
    A payload can only be checked with the same secret key.
    """

    name: str = "PBKHM"
    secret_key: bytes = field(default=b"", repr=False)
    digest: str = "sha256"
    iterations: int = 600_000
    dklen: int = 32
    salt_len: int = 16

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError(f"Password type {self.name} needs a secret key")

    def _derive(
        self, plain: str, salt: bytes, digest: str, iterations: int, dklen: int
    ) -> bytes:
        keyed = hmac.new(
            self.secret_key, plain.encode("utf-8"), digest
        ).digest()
        return hashlib.pbkdf2_hmac(digest, keyed, salt, iterations, dklen)

    @staticmethod
    def _decode(payload: str) -> Tuple[str, int, bytes, bytes]:
        m = _PAYLOAD_RE.fullmatch(payload)
        if not m:
            raise PasswordFormatError("Invalid PBKDF2 payload")
        digest = m.group(1)
        if digest not in DIGESTS:
            raise PasswordFormatError(f"Unsupported PBKDF2 digest: {digest}")
        try:
            salt = base64.b64decode(m.group(3).encode("ascii"), validate=True)
            key = base64.b64decode(m.group(4).encode("ascii"), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise PasswordFormatError("Invalid PBKDF2 salt or key") from exc
        iterations = int(m.group(2))
        if not 1 <= iterations <= MAX_ITERATIONS or not key:
            raise PasswordFormatError("Invalid PBKDF2 parameters")
        return digest, iterations, salt, key

    def hash(self, plain: str) -> str:
        """Hash password using the keyed PBKDF2 scheme.

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
        key = self._derive(plain, salt, self.digest, self.iterations, self.dklen)
        # pylint: disable=inconsistent-quotes
        return (
            f"{self.digest}${self.iterations}$"
            f"{base64.b64encode(salt).decode('ascii')}$"
            f"{base64.b64encode(key).decode('ascii')}"
        )

    def compare(self, payload: str, plain: str) -> ComparisonResult:
        """Compare password against a keyed PBKDF2 payload.

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
            If the payload is not a valid keyed PBKDF2 payload.
        """
        digest, iterations, salt, stored_key = self._decode(payload)
        try:
            key = self._derive(plain, salt, digest, iterations, len(stored_key))
        except (ValueError, OverflowError, TypeError) as exc:
            raise PasswordFormatError(f"Invalid PBKDF2 parameters: {exc}") from exc
        if hmac.compare_digest(key, stored_key):
            return ComparisonResult.match()
        return ComparisonResult.no_match()

    def is_preferred_format(self, payload: str) -> bool:
        """Check the digest and the iteration count of a payload.

        Parameters
        ----------
        payload : str
            The stored payload.

        Returns
        -------
        bool
            True if no rehash is needed.
        """
        digest, iterations, _, stored_key = self._decode(payload)
        return (
            digest == self.digest
            and iterations >= self.iterations
            and len(stored_key) == self.dklen
        )


__all__ = ["Pbkdf2HmacType"]
