# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from typing import Optional, Sequence

from ..config import Settings
from .dispatcher import DELIMITER, ParsedHash, PasswordDispatcher
from .errors import (
    HashParseError,
    InvalidFormatError,
    InvalidImplementationError,
    PasswordError,
    PasswordFormatError,
    PreferredTypeUnavailable,
    TypeUnavailableError,
    UnknownTypeError,
)
from .protocol import PasswordType, PasswordTypeFactory
from .registry import InitHook, TypeRegistry
from .result import ComparisonResult, ComparisonStatus, FailureReason


def create_dispatcher(
    settings: Optional[Settings] = None,
    hooks: Sequence[InitHook] = (),
) -> PasswordDispatcher:
    """Create an initialized registry and a dispatcher using it.

    Parameters
    ----------
    settings : Optional[Settings], optional
        The settings to use, by default the global ones.
    hooks : Sequence[InitHook], optional
        Extension hooks, run once after the built-in types are registered.

    Returns
    -------
    PasswordDispatcher
        The dispatcher.
    """
    registry = TypeRegistry(settings=settings, hooks=hooks)
    registry.initialize()
    return PasswordDispatcher(registry)


__all__ = [
    "DELIMITER",
    "ComparisonResult",
    "ComparisonStatus",
    "FailureReason",
    "HashParseError",
    "InitHook",
    "InvalidFormatError",
    "InvalidImplementationError",
    "ParsedHash",
    "PasswordDispatcher",
    "PasswordError",
    "PasswordFormatError",
    "PasswordType",
    "PasswordTypeFactory",
    "PreferredTypeUnavailable",
    "TypeRegistry",
    "TypeUnavailableError",
    "UnknownTypeError",
    "create_dispatcher",
]
