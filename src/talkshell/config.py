"""Shell configuration.

Defaults suit the published talks app. ``ShellConfig.from_env()`` lets
deployments override any field through ``TALKSHELL_*`` variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

from talkshell.errors import ConfigurationError

_ENV_PREFIX = "TALKSHELL_"


@dataclass(frozen=True, slots=True)
class ShellConfig:
    """Shell configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ShellConfig(initial_url="/favourites", storage_path="favs.db")
    """

    # Catalogue
    catalogue_url: str = "https://ldf.azureedge.net/talks.json"
    fetch_timeout: float = 10.0

    # Favourites persistence
    storage_path: str | Path | None = None  # None = in-memory medium
    favourites_key: str = "favourite-talks"

    # Navigation
    initial_url: str = "/"

    # Logging
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ShellConfig:
        """Build a config from ``TALKSHELL_*`` environment variables.

        Unset variables keep their defaults. ``TALKSHELL_FETCH_TIMEOUT``
        must parse as a float.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.name == "fetch_timeout":
                try:
                    overrides[f.name] = float(raw)
                except ValueError:
                    msg = f"{_ENV_PREFIX}FETCH_TIMEOUT must be a number, got {raw!r}"
                    raise ConfigurationError(msg) from None
            else:
                overrides[f.name] = raw
        return cls(**overrides)  # type: ignore[arg-type]
