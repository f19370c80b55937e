# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
from collections.abc import Generator
from typing import Any, Dict

import pytest

from pwhash_dispatch.config import ENV_PREFIX, Settings, SettingsManager
from pwhash_dispatch.hashing import PasswordDispatcher, TypeRegistry

TEST_SECRET_KEY = "pwhash_dispatch_test_secret_key" * 2

# cheap cost parameters, tests only check behaviour
FAST_PARAMS: Dict[str, Any] = {
    "scrypt_n": 1024,
    "scrypt_r": 8,
    "scrypt_p": 1,
    "argon2_time_cost": 1,
    "argon2_memory_cost": 1024,
    "argon2_parallelism": 1,
    "pbkdf2_iterations": 1000,
    "bcrypt_rounds": 4,
}


@pytest.fixture(autouse=True, name="clean_env")
def clean_env_fixture() -> Generator[None, None, None]:
    """Remove our env vars and the cached settings around each test."""
    saved = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }
    for key in saved:
        os.environ.pop(key, None)
    SettingsManager.reset_settings()
    yield
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved)
    SettingsManager.reset_settings()


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Settings without a secret key."""
    return Settings(secret_key=None, preferred_type=None, **FAST_PARAMS)


@pytest.fixture(name="keyed_settings")
def keyed_settings_fixture() -> Settings:
    """Settings with a site-wide secret key."""
    return Settings(
        secret_key=TEST_SECRET_KEY,  # type: ignore[arg-type]
        preferred_type=None,
        **FAST_PARAMS,
    )


@pytest.fixture(name="registry")
def registry_fixture(keyed_settings: Settings) -> TypeRegistry:
    """An initialized registry with all the built-in types."""
    registry = TypeRegistry(settings=keyed_settings)
    registry.initialize()
    return registry


@pytest.fixture(name="dispatcher")
def dispatcher_fixture(registry: TypeRegistry) -> PasswordDispatcher:
    """A dispatcher over the built-in types."""
    return PasswordDispatcher(registry)
