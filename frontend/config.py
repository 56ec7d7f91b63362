"""
Frontend settings.

Environment Variables:
    PORT: TCP port to listen on (default: 80, also when empty)
    HOST: Address to bind to (default: 0.0.0.0)
    BACKEND_URL: Base URL of the backend API (default: http://backend:3000)
    BACKEND_TIMEOUT: Seconds to wait for the backend (default: 1.0)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 80
DEFAULT_HOST = '0.0.0.0'
DEFAULT_BACKEND_URL = 'http://backend:3000'
DEFAULT_BACKEND_TIMEOUT = 1.0


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    backend_url: str = DEFAULT_BACKEND_URL
    backend_timeout: float = DEFAULT_BACKEND_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        if environ is None:
            environ = os.environ

        port = environ.get('PORT', '').strip()
        timeout = environ.get('BACKEND_TIMEOUT', '').strip()
        try:
            port = int(port) if port else DEFAULT_PORT
            timeout = float(timeout) if timeout else DEFAULT_BACKEND_TIMEOUT
        except ValueError as e:
            raise ValueError(f'Invalid PORT or BACKEND_TIMEOUT: {e}') from None

        return cls(
            port=port,
            host=environ.get('HOST') or DEFAULT_HOST,
            backend_url=(environ.get('BACKEND_URL') or DEFAULT_BACKEND_URL).rstrip('/'),
            backend_timeout=timeout,
        )
