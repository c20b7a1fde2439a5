"""
Fetcher and logging settings, read from an INI file with configparser.

Every key is optional; missing values fall back to the defaults below
(50 requests, then a 3 second pause).
"""

import re
from configparser import ConfigParser
from pathlib import Path

DEFAULT_USER_AGENT = "webindex"
DEFAULT_BATCH_SIZE = 50
DEFAULT_PAUSE = 3.0
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "Logs"


class Config(object):
    def __init__(self, config: ConfigParser | None = None):
        if config is None:
            config = ConfigParser()

        self.user_agent = config.get("IDENTIFICATION", "USERAGENT", fallback=DEFAULT_USER_AGENT).strip()
        if not re.match(r"^[a-zA-Z0-9_ ,./+()-]+$", self.user_agent):
            raise ValueError(f"Invalid characters in user agent: {self.user_agent!r}")

        # Requests allowed before the fetcher pauses
        self.batch_size = config.getint("FETCHER", "BATCHSIZE", fallback=DEFAULT_BATCH_SIZE)
        if self.batch_size < 1:
            raise ValueError(f"BATCHSIZE must be at least 1, got {self.batch_size}")

        # Pause between batches (seconds)
        self.pause = config.getfloat("FETCHER", "PAUSE", fallback=DEFAULT_PAUSE)
        if self.pause < 0:
            raise ValueError(f"PAUSE must be non-negative, got {self.pause}")

        # Per-request timeout (seconds)
        self.timeout = config.getfloat("FETCHER", "TIMEOUT", fallback=DEFAULT_TIMEOUT)
        if self.timeout <= 0:
            raise ValueError(f"TIMEOUT must be positive, got {self.timeout}")

        self.log_level = config.get("LOGGING", "LEVEL", fallback=DEFAULT_LOG_LEVEL).strip().upper()
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log LEVEL: {self.log_level!r}")
        self.log_dir = Path(config.get("LOGGING", "LOGDIR", fallback=DEFAULT_LOG_DIR))

    @classmethod
    def from_file(cls, config_file: Path | str) -> "Config":
        config_file = Path(config_file)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        cparser = ConfigParser()
        cparser.read(config_file, encoding="utf-8")
        return cls(cparser)

    def __repr__(self) -> str:
        return (
            f"Config(user_agent={self.user_agent!r}, batch_size={self.batch_size}, "
            f"pause={self.pause}, timeout={self.timeout})"
        )
