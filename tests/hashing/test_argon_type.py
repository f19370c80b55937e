# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use

"""Tests for the argon2 password type."""

import pytest

from pwhash_dispatch.hashing import ComparisonStatus, PasswordFormatError
from pwhash_dispatch.hashing._argon_type import Argon2Type

FAST = {"time_cost": 1, "memory_cost": 1024, "parallelism": 1}


class TestArgon2Type:
    """Test argon2 password type implementation."""

    def test_hash_creates_valid_payload(self) -> None:
        """Test that hash creates a valid argon2 payload."""
        password_type = Argon2Type(**FAST)
        payload = password_type.hash("test_password_123")  # nosemgrep # nosec
        assert payload.startswith("$argon2id$")
        assert len(payload) > 50

    def test_default_name(self) -> None:
        """Test the type registers as B by default."""
        assert Argon2Type(**FAST).name == "B"

    def test_compare(self) -> None:
        """Test right and wrong passwords."""
        password_type = Argon2Type(**FAST)
        payload = password_type.hash("test_password_123")  # nosemgrep # nosec
        assert password_type.compare(payload, "test_password_123").status is (
            ComparisonStatus.MATCH
        )
        assert password_type.compare(payload, "wrong_password").status is (
            ComparisonStatus.NO_MATCH
        )

    @pytest.mark.parametrize(
        "payload",
        [
            "",
            "not_an_argon2_hash",
            "$2b$12$somebcrypthash",
            "$argon2id$invalid",
            "$argon2id$",
        ],
    )
    def test_malformed_payload(self, payload: str) -> None:
        """Test malformed payloads raise a format error."""
        password_type = Argon2Type(**FAST)
        with pytest.raises(PasswordFormatError):
            password_type.compare(payload, "password")
        with pytest.raises(PasswordFormatError):
            password_type.is_preferred_format(payload)

    def test_preferred_format(self) -> None:
        """Test a fresh payload is in the preferred format."""
        password_type = Argon2Type(**FAST)
        payload = password_type.hash("test")  # nosemgrep # nosec
        assert password_type.is_preferred_format(payload)

    def test_preferred_format_with_different_parameters(self) -> None:
        """Test that changed parameters outdate existing payloads."""
        payload = Argon2Type(**FAST).hash("test")  # nosemgrep # nosec
        stronger = Argon2Type(time_cost=2, memory_cost=2048, parallelism=1)
        assert not stronger.is_preferred_format(payload)
        assert stronger.compare(payload, "test").matched

    def test_unicode_password(self) -> None:
        """Test hashing and comparing a unicode password."""
        password_type = Argon2Type(**FAST)
        payload = password_type.hash("🔐密码test🔐")  # nosemgrep # nosec
        assert password_type.compare(payload, "🔐密码test🔐").matched
        assert not password_type.compare(payload, "wrong").matched
