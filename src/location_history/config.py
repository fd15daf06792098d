"""Decoder configuration for location_history."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from location_history.exceptions import ConfigError

DEFAULT_BUF_SIZE = 64 * 1024
DEFAULT_PROGRESS_INTERVAL = 100_000


def _env_int(env: Mapping[str, str], key: str) -> int | None:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


@dataclasses.dataclass(frozen=True)
class DecoderConfig:
    """Decoder configuration.

    Parameters
    ----------
    buf_size : int
        Number of bytes ijson reads from the source per chunk.
    backend : str or None
        ijson backend name (``"yajl2_c"``, ``"yajl2_cffi"``, ``"python"``...).
        ``None`` uses the fastest backend ijson finds.
    progress_interval : int
        Emit a DEBUG progress line every this many records.
        Set to ``0`` to disable progress logging.
    """

    buf_size: int = DEFAULT_BUF_SIZE
    backend: str | None = None
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        if self.buf_size <= 0:
            raise ConfigError(f"buf_size must be positive, got {self.buf_size}")
        if self.progress_interval < 0:
            raise ConfigError(f"progress_interval must not be negative, got {self.progress_interval}")

    @classmethod
    def from_env(cls, **overrides: Any) -> DecoderConfig:
        """Create configuration from ``LOCATION_HISTORY_*`` environment variables.

        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DecoderConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        buf_size = _env_int(env, "LOCATION_HISTORY_BUF_SIZE")
        if buf_size is not None:
            config_kwargs["buf_size"] = buf_size

        backend = env.get("LOCATION_HISTORY_BACKEND")
        if backend:
            config_kwargs["backend"] = backend.strip()

        interval = _env_int(env, "LOCATION_HISTORY_PROGRESS_INTERVAL")
        if interval is not None:
            config_kwargs["progress_interval"] = interval

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
