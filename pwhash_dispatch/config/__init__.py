# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for pwhash-dispatch."""

from ._common import ENV_PREFIX
from .settings import Settings
from .settings_manager import SettingsManager

__all__ = [
    "Settings",
    "SettingsManager",
    "ENV_PREFIX",
]
