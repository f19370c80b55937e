# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing settings module."""

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hashing import (
    get_argon2_memory_cost,
    get_argon2_parallelism,
    get_argon2_time_cost,
    get_bcrypt_rounds,
    get_pbkdf2_iterations,
    get_preferred_type,
    get_scrypt_n,
    get_scrypt_p,
    get_scrypt_r,
    get_secret_key,
)

LOG = logging.getLogger(__name__)


def _get_secret_key() -> SecretStr | None:
    secret_key = get_secret_key()
    if secret_key:
        return SecretStr(secret_key)
    return None


class Settings(BaseSettings):
    """Settings class."""

    # The site-wide secret, enables the keyed PBKHM type
    secret_key: Optional[SecretStr] = _get_secret_key()
    preferred_type: Optional[str] = get_preferred_type()
    # Type A
    scrypt_n: Annotated[int, Field(ge=2, le=2**20)] = get_scrypt_n()
    scrypt_r: Annotated[int, Field(ge=1, le=32)] = get_scrypt_r()
    scrypt_p: Annotated[int, Field(ge=1, le=16)] = get_scrypt_p()
    # Type B
    argon2_time_cost: Annotated[int, Field(ge=1, le=100)] = (
        get_argon2_time_cost()
    )
    argon2_memory_cost: Annotated[int, Field(ge=8, le=4 * 1024 * 1024)] = (
        get_argon2_memory_cost()
    )
    argon2_parallelism: Annotated[int, Field(ge=1, le=64)] = (
        get_argon2_parallelism()
    )
    # Type PBKHM
    pbkdf2_iterations: Annotated[int, Field(ge=1, le=10_000_000)] = (
        get_pbkdf2_iterations()
    )
    # Type BC
    bcrypt_rounds: Annotated[int, Field(ge=4, le=31)] = get_bcrypt_rounds()
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        instance = cls()
        if instance.secret_key is None:
            LOG.debug("No secret key configured, keyed hashes are disabled")
        return instance

    @property
    def has_secret_key(self) -> bool:
        """Whether a non-empty site-wide secret key is configured."""
        return bool(self.secret_key and self.secret_key.get_secret_value())

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        LogLevelType
            The log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("preferred_type", mode="before")
    @classmethod
    def validate_preferred_type(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the preferred type identifier.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        str | None
            The identifier, None for an empty value

        Raises
        ------
        ValueError
            If the identifier contains the ':' delimiter
        """
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            if ":" in value:
                raise ValueError("Password type names cannot contain ':'")
        return value

    @field_validator("scrypt_n", mode="after")
    @classmethod
    def validate_scrypt_n(cls, value: int, info: ValidationInfo) -> int:
        """Validate the scrypt cost.

        Parameters
        ----------
        value : int
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        int
            The value

        Raises
        ------
        ValueError
            If the value is not a power of two
        """
        if value & (value - 1):
            raise ValueError("scrypt_n must be a power of two")
        return value
