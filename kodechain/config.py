"""
KodeChain Core Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Optional

from kodechain.constants import (
    DEFAULT_KEYFILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FORMAT,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT
    max_size_mb: int = 10
    backup_count: int = 3


@dataclass
class CodecConfig:
    """ABI codec configuration."""
    strict_decode: bool = False


@dataclass
class WalletConfig:
    """Wallet configuration."""
    keyfile: str = DEFAULT_KEYFILE

    @property
    def keyfile_path(self) -> Path:
        return Path(self.keyfile).expanduser()


@dataclass
class SDKConfig:
    """
    Complete SDK configuration.

    All settings for the codec, wallet and logging layers.
    """
    log: LogConfig = field(default_factory=LogConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)
    wallet: WalletConfig = field(default_factory=WalletConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.log.level.upper() not in _LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log.level}")

        if self.log.max_size_mb < 1:
            errors.append("log max_size_mb must be at least 1")

        if self.log.backup_count < 0:
            errors.append("log backup_count cannot be negative")

        if not self.wallet.keyfile:
            errors.append("wallet keyfile cannot be empty")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "SDKConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls()

        if "log" in data:
            config.log = LogConfig(**data["log"])

        if "codec" in data:
            config.codec = CodecConfig(**data["codec"])

        if "wallet" in data:
            config.wallet = WalletConfig(**data["wallet"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "log": asdict(self.log),
            "codec": asdict(self.codec),
            "wallet": asdict(self.wallet),
        }


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
