# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use

"""Tests for the keyed PBKDF2-HMAC password type."""

import pytest

from pwhash_dispatch.hashing import ComparisonStatus, PasswordFormatError
from pwhash_dispatch.hashing._pbkdf2_hmac_type import Pbkdf2HmacType

SECRET = b"a-site-wide-secret-key"


def _make(**kwargs: object) -> Pbkdf2HmacType:
    params = {"secret_key": SECRET, "iterations": 1000}
    params.update(kwargs)
    return Pbkdf2HmacType(**params)  # type: ignore[arg-type]


class TestPbkdf2HmacType:
    """Test keyed PBKDF2 password type implementation."""

    def test_needs_a_secret(self) -> None:
        """Test the type refuses to work without a key."""
        with pytest.raises(ValueError):
            Pbkdf2HmacType()

    def test_secret_is_not_in_repr(self) -> None:
        """Test the key does not leak through repr."""
        assert "site-wide" not in repr(_make())

    def test_hash_creates_valid_payload(self) -> None:
        """Test the payload layout."""
        payload = _make().hash("test_password_123")  # nosemgrep # nosec
        digest, iterations, salt, key = payload.split("$")
        assert digest == "sha256"
        assert iterations == "1000"
        assert salt and key

    def test_compare(self) -> None:
        """Test right and wrong passwords."""
        password_type = _make()
        payload = password_type.hash("test_password_123")  # nosemgrep # nosec
        assert password_type.compare(payload, "test_password_123").status is (
            ComparisonStatus.MATCH
        )
        assert password_type.compare(payload, "wrong").status is (
            ComparisonStatus.NO_MATCH
        )

    def test_other_secret_does_not_match(self) -> None:
        """Test a payload is bound to the secret key."""
        payload = _make().hash("test")  # nosemgrep # nosec
        other = _make(secret_key=b"another-secret")
        assert other.compare(payload, "test").status is (
            ComparisonStatus.NO_MATCH
        )

    @pytest.mark.parametrize(
        "payload",
        [
            "",
            "garbage",
            "sha256$abc$c2FsdA==$a2V5",
            "sha256$0$c2FsdA==$a2V5",
            "nosuchdigest$1000$c2FsdA==$a2V5",
            "sha256$1000$c2Fsd$a2V5",
            "shake_128$1000$c2FsdA==$a2V5",
            "md5$1000$c2FsdA==$a2V5",
            "sha256$99999999999999999999$c2FsdA==$a2V5",
            "sha256$1000$c2FsdA==$a2V5\n",
        ],
    )
    def test_malformed_payload(self, payload: str) -> None:
        """Test malformed payloads raise a format error."""
        password_type = _make()
        with pytest.raises(PasswordFormatError):
            password_type.compare(payload, "password")
        with pytest.raises(PasswordFormatError):
            password_type.is_preferred_format(payload)

    def test_preferred_format_follows_iterations(self) -> None:
        """Test fewer iterations outdate a payload, more do not."""
        payload = _make(iterations=2000).hash("test")  # nosemgrep # nosec
        assert _make(iterations=2000).is_preferred_format(payload)
        assert _make(iterations=1000).is_preferred_format(payload)
        assert not _make(iterations=4000).is_preferred_format(payload)
        assert _make(iterations=4000).compare(payload, "test").matched
