"""
Backend settings, read once from the environment at startup.

Environment Variables:
    PORT: TCP port to listen on (default: 3000, also when empty)
    HOST: Address to bind to (default: 0.0.0.0)
    BODY_LIMIT: Largest accepted request body in bytes (default: 102400)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_HOST = '0.0.0.0'
DEFAULT_BODY_LIMIT = 100 * 1024


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    body_limit: int = DEFAULT_BODY_LIMIT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from ``environ`` (``os.environ`` when omitted)."""
        if environ is None:
            environ = os.environ
        return cls(
            port=_int_from_env(environ, 'PORT', DEFAULT_PORT),
            host=environ.get('HOST') or DEFAULT_HOST,
            body_limit=_int_from_env(environ, 'BODY_LIMIT', DEFAULT_BODY_LIMIT),
        )
