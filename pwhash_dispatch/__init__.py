# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Versioned, pluggable password hashing."""

from ._version import __version__
from .hashing import (
    ComparisonResult,
    ComparisonStatus,
    FailureReason,
    PasswordDispatcher,
    PasswordType,
    TypeRegistry,
    create_dispatcher,
)

__all__ = [
    "__version__",
    "ComparisonResult",
    "ComparisonStatus",
    "FailureReason",
    "PasswordDispatcher",
    "PasswordType",
    "TypeRegistry",
    "create_dispatcher",
]
