# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Outcome of comparing a stored hash with a plaintext password."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ComparisonStatus(str, Enum):
    """The comparison outcome."""

    MATCH = "match"
    NO_MATCH = "no-match"
    FAILURE = "failure"


class FailureReason(str, Enum):
    """Why a comparison could not be performed."""

    INVALID_FORMAT = "password-crypt-invalid"
    UNKNOWN_TYPE = "password-crypt-notype"
    INVALID_IMPLEMENTATION = "password-crypt-badtype"
    DELEGATED_FORMAT = "password-crypt-baddata"


@dataclass(frozen=True)
class ComparisonResult:
    """Tri-state comparison result.

    A ``NO_MATCH`` means the password was wrong. A ``FAILURE`` means the
    stored hash could not be checked at all (bad data or configuration),
    and ``reason`` says why.
    """

    status: ComparisonStatus
    reason: Optional[FailureReason] = None
    message: str = ""

    @classmethod
    def match(cls) -> "ComparisonResult":
        """Create a successful match result.

        Returns
        -------
        ComparisonResult
            The match result.
        """
        return cls(ComparisonStatus.MATCH)

    @classmethod
    def no_match(cls) -> "ComparisonResult":
        """Create a result for a wrong password.

        Returns
        -------
        ComparisonResult
            The no-match result.
        """
        return cls(ComparisonStatus.NO_MATCH)

    @classmethod
    def failure(
        cls, reason: FailureReason, message: str = ""
    ) -> "ComparisonResult":
        """Create a failure result.

        Parameters
        ----------
        reason : FailureReason
            Why the comparison failed.
        message : str, optional
            Extra diagnostic details, by default "".

        Returns
        -------
        ComparisonResult
            The failure result.
        """
        return cls(ComparisonStatus.FAILURE, reason=reason, message=message)

    @property
    def ok(self) -> bool:
        """Whether the comparison ran (match or no-match)."""
        return self.status is not ComparisonStatus.FAILURE

    @property
    def matched(self) -> bool:
        """Whether the password matched."""
        return self.status is ComparisonStatus.MATCH

    def __bool__(self) -> bool:
        return self.matched


__all__ = ["ComparisonResult", "ComparisonStatus", "FailureReason"]
