"""Datasource settings with explicit argument > env var > defaults precedence."""

import os
from dataclasses import dataclass
from typing import Optional

from .vault.crypto import MAX_ITERATIONS


DEFAULT_PBKDF2_ITERATIONS = 100000

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str) -> Optional[bool]:
    """Read a boolean env var. Returns None when unset or unrecognised."""
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class DatasourceSettings:
    """Runtime settings shared by every datasource in the process."""
    pbkdf2_iterations: int = 0
    atomic_writes: Optional[bool] = None
    validate_ids: Optional[bool] = None
    log_dir: Optional[str] = None

    def __post_init__(self):
        # Apply env var defaults for anything not given explicitly
        if not self.pbkdf2_iterations:
            env_iterations = os.getenv("BCUP_PBKDF2_ITERATIONS")
            self.pbkdf2_iterations = int(env_iterations) if env_iterations else DEFAULT_PBKDF2_ITERATIONS
        if not 1 <= self.pbkdf2_iterations <= MAX_ITERATIONS:
            raise ValueError(
                f"pbkdf2_iterations must be between 1 and {MAX_ITERATIONS}, got {self.pbkdf2_iterations}"
            )

        if self.atomic_writes is None:
            env_atomic = _env_flag("BCUP_ATOMIC_WRITES")
            self.atomic_writes = env_atomic if env_atomic is not None else False
        if self.validate_ids is None:
            env_validate = _env_flag("BCUP_VALIDATE_IDS")
            self.validate_ids = env_validate if env_validate is not None else True
        if not self.log_dir:
            self.log_dir = os.getenv("BCUP_LOG_DIR") or None


# Process-wide settings, built lazily on first use
_settings: Optional[DatasourceSettings] = None


def get_settings() -> DatasourceSettings:
    """Get the process-wide settings, building them from the environment if needed."""
    global _settings
    if _settings is None:
        _settings = DatasourceSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
