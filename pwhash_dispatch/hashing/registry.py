# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=broad-exception-caught

"""Registry of the known password types and the preferred one."""

import logging
import threading
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence

from ..config import Settings, SettingsManager
from ._argon_type import Argon2Type
from ._bcrypt_type import BcryptType
from ._pbkdf2_hmac_type import Pbkdf2HmacType
from ._scrypt_type import ScryptType
from .errors import InvalidImplementationError, UnknownTypeError
from .protocol import PasswordType, PasswordTypeFactory

LOG = logging.getLogger(__name__)

BASIC_TYPE = "A"
ENHANCED_TYPE = "B"
KEYED_TYPE = "PBKHM"
BCRYPT_TYPE = "BC"

InitHook = Callable[["TypeRegistry", str], Optional[str]]
"""Runs once at initialization with the registry and the candidate
preferred type; may register types and returns the preferred type to use
(None keeps the candidate)."""


def check_identifier(identifier: str) -> str:
    """Make sure a type identifier can be written into a stored hash.

    Parameters
    ----------
    identifier : str
        The type identifier.

    Returns
    -------
    str
        The identifier.

    Raises
    ------
    ValueError
        If the identifier is empty or contains the ':' delimiter.
    """
    if not isinstance(identifier, str) or not identifier:
        raise ValueError("A password type needs a non-empty name")
    if ":" in identifier:
        raise ValueError(f"Password type name {identifier!r} contains ':'")
    return identifier


def register_builtin_types(registry: "TypeRegistry", settings: Settings) -> None:
    """Register the core password types.

    Parameters
    ----------
    registry : TypeRegistry
        The registry to populate.
    settings : Settings
        The hashing parameters.
    """
    registry.register_type(
        BASIC_TYPE,
        partial(
            ScryptType,
            n=settings.scrypt_n,
            r=settings.scrypt_r,
            p=settings.scrypt_p,
        ),
    )
    registry.register_type(
        ENHANCED_TYPE,
        partial(
            Argon2Type,
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        ),
    )
    registry.register_type(
        BCRYPT_TYPE, partial(BcryptType, rounds=settings.bcrypt_rounds)
    )
    secret_key = (
        settings.secret_key.get_secret_value() if settings.secret_key else ""
    )
    if secret_key:
        registry.register_type(
            KEYED_TYPE,
            partial(
                Pbkdf2HmacType,
                secret_key=secret_key.encode(),
                iterations=settings.pbkdf2_iterations,
            ),
        )


class TypeRegistry:
    """Maps type identifiers to password type factories.

    The registry is populated once by :meth:`initialize` (built-in types,
    then the hooks) and is read-only afterwards. Types may still be
    registered at any time; the last registration wins.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        hooks: Sequence[InitHook] = (),
    ) -> None:
        """Create a registry.

        Parameters
        ----------
        settings : Optional[Settings], optional
            The settings to initialize with, by default the global ones.
        hooks : Sequence[InitHook], optional
            Extension hooks to run once at initialization.
        """
        self._settings = settings
        self._hooks: List[InitHook] = list(hooks)
        self._types: Dict[str, PasswordTypeFactory] = {}
        self._preferred_type = BASIC_TYPE
        self._lock = threading.RLock()
        self._initializing = False
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Whether :meth:`initialize` has completed."""
        return self._initialized

    @property
    def preferred_type(self) -> str:
        """The type used for new hashes."""
        self.initialize()
        return self._preferred_type

    @property
    def types(self) -> List[str]:
        """The registered type identifiers, sorted."""
        self.initialize()
        return sorted(self._types)

    def __contains__(self, identifier: object) -> bool:
        self.initialize()
        return identifier in self._types

    def add_hook(self, hook: InitHook) -> None:
        """Add an extension hook, only effective before initialization.

        Parameters
        ----------
        hook : InitHook
            The hook to add.
        """
        if self._initialized:
            LOG.warning("Registry already initialized, hook %r ignored", hook)
            return
        self._hooks.append(hook)

    def register_type(
        self, identifier: str, factory: PasswordTypeFactory
    ) -> None:
        """Register (or replace) a password type.

        Parameters
        ----------
        identifier : str
            The type name. Core uses short names like 'A', 'B',
            extensions should use more specific ones.
        factory : PasswordTypeFactory
            Called with the identifier, must return a PasswordType.
            It is only checked when the type is resolved.
        """
        check_identifier(identifier)
        if identifier in self._types:
            LOG.debug("Replacing password type %s", identifier)
        self._types[identifier] = factory

    def set_preferred_type(self, identifier: str) -> None:
        """Override the type used for new hashes.

        Hooks should return the identifier instead of calling this.

        Parameters
        ----------
        identifier : str
            The type name.
        """
        check_identifier(identifier)
        # initialize first, it would overwrite the selection otherwise
        self.initialize()
        LOG.info("Preferred password type set to %s", identifier)
        self._preferred_type = identifier

    def initialize(self) -> None:
        """Register the built-in types, pick the preferred type, run hooks.

        Runs at most once, later (or concurrent) calls are no-ops.
        """
        if self._initialized:
            return
        with self._lock:
            if self._initialized or self._initializing:
                return
            self._initializing = True
            try:
                self._initialize()
                self._initialized = True
            finally:
                self._initializing = False

    def _initialize(self) -> None:
        settings = self._settings or SettingsManager.get_settings()
        register_builtin_types(self, settings)
        if settings.preferred_type:
            preferred = settings.preferred_type
        elif KEYED_TYPE in self._types:
            preferred = KEYED_TYPE
        else:
            preferred = BASIC_TYPE
        self._preferred_type = preferred
        for hook in self._hooks:
            changed = hook(self, self._preferred_type)
            if changed is not None:
                self._preferred_type = check_identifier(changed)
        LOG.debug(
            "Password types %s registered, preferred: %s",
            sorted(self._types),
            self._preferred_type,
        )

    def lookup(self, identifier: Optional[str] = None) -> PasswordType:
        """Build a new instance of a password type.

        Parameters
        ----------
        identifier : Optional[str], optional
            The type to build, by default the preferred one.

        Returns
        -------
        PasswordType
            A fresh password type instance.

        Raises
        ------
        UnknownTypeError
            If the type is not registered.
        InvalidImplementationError
            If the factory did not produce a usable password type.
        """
        self.initialize()
        if identifier is None:
            identifier = self._preferred_type
        factory = self._types.get(identifier)
        if factory is None:
            LOG.warning("Password type %s does not exist.", identifier)
            raise UnknownTypeError(f"Unknown password type: {identifier}")
        try:
            instance = factory(identifier)
        except Exception as exc:
            LOG.warning(
                "Password type %s could not be created: %s", identifier, exc
            )
            raise InvalidImplementationError(
                f"Password type {identifier} could not be created"
            ) from exc
        if not isinstance(instance, PasswordType):
            LOG.warning(
                "Password type %s factory %r does not implement PasswordType.",
                identifier,
                factory,
            )
            raise InvalidImplementationError(
                f"Password type {identifier} does not implement PasswordType"
            )
        if instance.name != identifier:
            LOG.warning(
                "Password type %s reports the name %r.",
                identifier,
                instance.name,
            )
            raise InvalidImplementationError(
                f"Password type {identifier} reports another name"
            )
        return instance

    def resolve(self, identifier: Optional[str] = None) -> PasswordType | None:
        """Like :meth:`lookup`, but None if the type is not usable.

        Parameters
        ----------
        identifier : Optional[str], optional
            The type to build, by default the preferred one.

        Returns
        -------
        PasswordType | None
            A fresh password type instance, None if not usable.
        """
        try:
            return self.lookup(identifier)
        except (UnknownTypeError, InvalidImplementationError):
            return None


__all__ = [
    "BASIC_TYPE",
    "ENHANCED_TYPE",
    "KEYED_TYPE",
    "BCRYPT_TYPE",
    "InitHook",
    "TypeRegistry",
    "check_identifier",
    "register_builtin_types",
]
