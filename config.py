# config.py - Runtime settings read from the environment
import logging
import os

DEFAULT_PORT = 3000
DEFAULT_HOST = '0.0.0.0'
DEFAULT_LOG_LEVEL = 'INFO'


class Config:
    def __init__(self):
        self.port = self._parse_port(os.environ.get('PORT', str(DEFAULT_PORT)))
        self.host = os.environ.get('HOST', DEFAULT_HOST).strip() or DEFAULT_HOST
        self.log_level = self._parse_log_level(os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL))

    @staticmethod
    def _parse_port(raw):
        try:
            port = int(raw.strip())
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw!r}") from None
        if not 0 <= port <= 65535:
            raise ValueError(f"PORT out of range: {port}")
        return port

    @staticmethod
    def _parse_log_level(raw):
        # Unknown names fall back to INFO
        level = logging.getLevelName(raw.strip().upper())
        return level if isinstance(level, int) else logging.INFO
