# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Password hash dispatcher for versioned ``:<type>:<payload>`` hashes."""

import logging
from typing import NamedTuple, Optional, Tuple

from .errors import (
    HashParseError,
    InvalidFormatError,
    PasswordFormatError,
    PreferredTypeUnavailable,
    TypeUnavailableError,
)
from .protocol import PasswordType
from .registry import TypeRegistry
from .result import ComparisonResult, FailureReason

LOG = logging.getLogger(__name__)

DELIMITER = ":"


class ParsedHash(NamedTuple):
    """A stored hash split into its resolved type and payload."""

    password_type: PasswordType
    payload: str


class PasswordDispatcher:
    """Creates and checks stored hashes using the registered types.

    The dispatcher only knows the ``:<type>:<payload>`` envelope. Everything
    after the second delimiter belongs to the password type.
    """

    def __init__(self, registry: TypeRegistry) -> None:
        """Initialize the dispatcher.

        Parameters
        ----------
        registry : TypeRegistry
            The registry to resolve password types with.
        """
        self.registry = registry

    def parse_hash(self, stored: str) -> ParsedHash:
        """Split a stored hash and resolve its password type.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        ParsedHash
            The resolved password type and the (opaque) payload.

        Raises
        ------
        InvalidFormatError
            If the stored hash does not start with ':' or has no type.
        UnknownTypeError
            If the type is not registered.
        InvalidImplementationError
            If the type is registered but not usable.
        """
        if not isinstance(stored, str):
            raise InvalidFormatError("Stored hash is not a string")
        parts = stored.split(DELIMITER, 2)
        # ":A:..." splits into ["", "A", "..."]; unversioned (legacy)
        # hashes have something before the first delimiter.
        if parts[0] != "":
            raise InvalidFormatError("Stored hash has no type prefix")
        if len(parts) < 2 or not parts[1]:
            raise InvalidFormatError("Stored hash has an empty type")
        identifier = parts[1]
        # A missing payload segment is read as an empty payload.
        payload = parts[2] if len(parts) > 2 else ""
        password_type = self.registry.lookup(identifier)
        return ParsedHash(password_type, payload)

    def crypt(self, plain: str) -> str:
        """Hash a password with the preferred password type.

        Parameters
        ----------
        plain : str
            The plain text password.

        Returns
        -------
        str
            The stored hash, ``:<type>:<payload>``.

        Raises
        ------
        PreferredTypeUnavailable
            If the preferred type is not registered or not usable.
        """
        preferred = self.registry.preferred_type
        try:
            password_type = self.registry.lookup(preferred)
        except HashParseError as exc:
            raise PreferredTypeUnavailable(
                f"Preferred password type {preferred} is not usable"
            ) from exc
        return self._crypt(password_type, plain)

    def crypt_with(self, identifier: str, plain: str) -> str:
        """Hash a password with a specific password type.

        Parameters
        ----------
        identifier : str
            The password type to use.
        plain : str
            The plain text password.

        Returns
        -------
        str
            The stored hash, ``:<type>:<payload>``.

        Raises
        ------
        TypeUnavailableError
            If the type is not registered or not usable.
        """
        try:
            password_type = self.registry.lookup(identifier)
        except HashParseError as exc:
            raise TypeUnavailableError(
                f"Password type {identifier} is not usable"
            ) from exc
        return self._crypt(password_type, plain)

    @staticmethod
    def _crypt(password_type: PasswordType, plain: str) -> str:
        payload = password_type.hash(plain)
        return f"{DELIMITER}{password_type.name}{DELIMITER}{payload}"

    def compare(self, stored: str, plain: str) -> ComparisonResult:
        """Compare a stored hash with a plain text password.

        Parameters
        ----------
        stored : str
            The stored hash.
        plain : str
            The plain text password.

        Returns
        -------
        ComparisonResult
            - match if the password is correct
            - no-match if the password is wrong
            - failure if the stored hash could not be checked; this is
              not the user's fault and ``reason`` tells why.
        """
        try:
            password_type, payload = self.parse_hash(stored)
        except HashParseError as exc:
            LOG.debug("Cannot parse stored hash: %s", exc)
            return ComparisonResult.failure(exc.reason, str(exc))
        try:
            result = password_type.compare(payload, plain)
        except PasswordFormatError as exc:
            LOG.debug(
                "Password type %s rejected its payload: %s",
                password_type.name,
                exc,
            )
            return ComparisonResult.failure(exc.reason, str(exc))
        if isinstance(result, ComparisonResult):
            return result
        if result is True:
            return ComparisonResult.match()
        if result is False:
            return ComparisonResult.no_match()
        LOG.warning(
            "Password type %s returned %r from compare.",
            password_type.name,
            result,
        )
        return ComparisonResult.failure(
            FailureReason.INVALID_IMPLEMENTATION,
            f"Password type {password_type.name} returned no result",
        )

    def is_preferred_format(self, stored: str) -> bool:
        """Check if a stored hash is in the preferred format.

        This is False when the stored hash cannot be parsed, when it was
        made with another type than the preferred one, or when the type
        itself asks for new parameters. When False, the password can be
        upgraded by calling :meth:`crypt` again.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True only if no rehash is needed.
        """
        try:
            password_type, payload = self.parse_hash(stored)
        except HashParseError:
            return False
        if password_type.name != self.registry.preferred_type:
            return False
        try:
            return password_type.is_preferred_format(payload) is True
        except PasswordFormatError:
            return False

    def needs_rehash(self, stored: str) -> bool:
        """Check if a stored hash should be replaced.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the password should be hashed again.
        """
        return not self.is_preferred_format(stored)

    def verify_and_update(
        self, stored: str, plain: str
    ) -> Tuple[ComparisonResult, Optional[str]]:
        """Compare a password and re-hash it if the stored hash is outdated.

        Parameters
        ----------
        stored : str
            The stored hash.
        plain : str
            The plain text password.

        Returns
        -------
        Tuple[ComparisonResult, Optional[str]]
            The comparison result and, for a match with an outdated
            stored hash, the new hash to store.
        """
        result = self.compare(stored, plain)
        if not result.matched or self.is_preferred_format(stored):
            return result, None
        return result, self.crypt(plain)


__all__ = [
    "DELIMITER",
    "ParsedHash",
    "PasswordDispatcher",
]
