# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "PWHASH_"
DOT_ENV_PATH = Path.cwd() / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=False)


T = TypeVar("T")


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
    skip_prefix: bool = False,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : str
        The CLI argument key
    env_key : str
        The environment variable key
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value
    skip_prefix : bool, optional
        Whether to skip the prefix for the env var, by default False
    Returns
    -------
    T
        The value
    """
    value_str: Optional[str] = None
    env_var = f"{ENV_PREFIX}{env_key}" if not skip_prefix else env_key

    if cli_key in sys.argv:
        cli_index = sys.argv.index(cli_key) + 1
        if cli_index < len(sys.argv):
            value_str = sys.argv[cli_index]

    if not value_str:
        from_env = os.environ.get(env_var)
        if from_env:
            value_str = from_env

    # pylint: disable=too-many-try-statements
    if value_str:
        try:
            casted = cast(value_str)
            if cast is str and not casted:  # pragma: no cover
                return fallback
            return casted
        except (ValueError, TypeError):
            pass

    return fallback
