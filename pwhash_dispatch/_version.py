# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Version information for pwhash-dispatch."""

__version__ = "0.1.0"
