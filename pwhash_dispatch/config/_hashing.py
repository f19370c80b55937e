# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing related configuration.

Environment variables (with prefix PWHASH_)
-------------------------------------------
SECRET_KEY (str) # default: None (keyed PBKHM type disabled)
PREFERRED_TYPE (str) # default: None (PBKHM if SECRET_KEY, else A)
SCRYPT_N (int) # default: 16384
SCRYPT_R (int) # default: 8
SCRYPT_P (int) # default: 1
ARGON2_TIME_COST (int) # default: 2
ARGON2_MEMORY_COST (int) # default: 65536
ARGON2_PARALLELISM (int) # default: 1
PBKDF2_ITERATIONS (int) # default: 600000
BCRYPT_ROUNDS (int) # default: 12

Command line arguments (no prefix)
----------------------------------
--secret-key (str)
--preferred-type (str)
"""

from ._common import get_value


def get_secret_key() -> str | None:
    """Get the site-wide secret key.

    Returns
    -------
    str | None
        The secret key, None if not set
    """
    value = get_value("--secret-key", "SECRET_KEY", str, None)
    if not value:  # skip empty strings
        return None
    return value


def get_preferred_type() -> str | None:
    """Get the configured preferred password type.

    Returns
    -------
    str | None
        The preferred type, None to pick one from the secret key
    """
    value = get_value("--preferred-type", "PREFERRED_TYPE", str, None)
    if not value:
        return None
    return value


def get_scrypt_n() -> int:
    """Get the scrypt CPU/memory cost.

    Returns
    -------
    int
        The scrypt n parameter
    """
    return get_value("--scrypt-n", "SCRYPT_N", int, 16384)


def get_scrypt_r() -> int:
    """Get the scrypt block size.

    Returns
    -------
    int
        The scrypt r parameter
    """
    return get_value("--scrypt-r", "SCRYPT_R", int, 8)


def get_scrypt_p() -> int:
    """Get the scrypt parallelization.

    Returns
    -------
    int
        The scrypt p parameter
    """
    return get_value("--scrypt-p", "SCRYPT_P", int, 1)


def get_argon2_time_cost() -> int:
    """Get the argon2 time cost.

    Returns
    -------
    int
        The number of iterations
    """
    return get_value("--argon2-time-cost", "ARGON2_TIME_COST", int, 2)


def get_argon2_memory_cost() -> int:
    """Get the argon2 memory cost in KiB.

    Returns
    -------
    int
        The memory cost
    """
    return get_value("--argon2-memory-cost", "ARGON2_MEMORY_COST", int, 65536)


def get_argon2_parallelism() -> int:
    """Get the argon2 parallelism.

    Returns
    -------
    int
        The number of lanes
    """
    return get_value("--argon2-parallelism", "ARGON2_PARALLELISM", int, 1)


def get_pbkdf2_iterations() -> int:
    """Get the PBKDF2 iteration count.

    Returns
    -------
    int
        The iteration count
    """
    return get_value("--pbkdf2-iterations", "PBKDF2_ITERATIONS", int, 600_000)


def get_bcrypt_rounds() -> int:
    """Get the bcrypt cost factor.

    Returns
    -------
    int
        The log2 rounds
    """
    return get_value("--bcrypt-rounds", "BCRYPT_ROUNDS", int, 12)
