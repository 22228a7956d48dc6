from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class SelectorKitConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "WARNING"
    json_indent: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SelectorKitConfig:
        """Read overrides from SELECTORKIT_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("SELECTORKIT_HOST", defaults.host),
            port=int(env.get("SELECTORKIT_PORT", defaults.port)),
            log_level=env.get("SELECTORKIT_LOG_LEVEL", defaults.log_level).upper(),
        )
