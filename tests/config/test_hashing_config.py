# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Test pwhash_dispatch.config._hashing."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# noinspection PyProtectedMember
from pwhash_dispatch.config._common import ENV_PREFIX

# noinspection PyProtectedMember
from pwhash_dispatch.config._hashing import (
    get_argon2_memory_cost,
    get_bcrypt_rounds,
    get_pbkdf2_iterations,
    get_preferred_type,
    get_scrypt_n,
    get_secret_key,
)

THIS_FILE = Path(__file__).resolve()


@pytest.fixture(scope="function", autouse=True, name="clear_args")
def clear_args_fixture() -> Generator[None, None, None]:
    """Clear command-line arguments."""
    original_argv = sys.argv[:]
    sys.argv = [str(THIS_FILE)]
    yield
    sys.argv = original_argv


def test_defaults() -> None:
    """Test the defaults without env vars."""
    assert get_secret_key() is None
    assert get_preferred_type() is None
    assert get_scrypt_n() == 16384
    assert get_argon2_memory_cost() == 65536
    assert get_pbkdf2_iterations() == 600_000
    assert get_bcrypt_rounds() == 12


def test_from_env() -> None:
    """Test the values are read from the environment."""
    os.environ[f"{ENV_PREFIX}SECRET_KEY"] = "s3cr3t"
    os.environ[f"{ENV_PREFIX}PREFERRED_TYPE"] = "B"
    os.environ[f"{ENV_PREFIX}SCRYPT_N"] = "2048"
    os.environ[f"{ENV_PREFIX}BCRYPT_ROUNDS"] = "10"
    assert get_secret_key() == "s3cr3t"
    assert get_preferred_type() == "B"
    assert get_scrypt_n() == 2048
    assert get_bcrypt_rounds() == 10


def test_from_cli() -> None:
    """Test the values are read from the command line."""
    sys.argv = [str(THIS_FILE), "--secret-key", "from-cli"]
    assert get_secret_key() == "from-cli"
