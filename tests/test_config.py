"""
KodeChain Configuration Tests
"""

import json
import logging
import logging.handlers
from pathlib import Path

from kodechain.config import (
    SDKConfig,
    LogConfig,
    CodecConfig,
    WalletConfig,
    setup_logging,
)


class TestSDKConfig:
    """Tests for SDKConfig."""

    def test_defaults_are_valid(self):
        config = SDKConfig()
        assert config.validate() == []
        assert config.codec.strict_decode is False
        assert config.log.level == "INFO"

    def test_invalid_values(self):
        config = SDKConfig(
            log=LogConfig(level="LOUD", max_size_mb=0, backup_count=-1),
            wallet=WalletConfig(keyfile=""),
        )
        errors = config.validate()
        assert len(errors) == 4
        assert "Invalid log level: LOUD" in errors

    def test_keyfile_path_expands_user(self):
        path = WalletConfig(keyfile="~/wallet.json").keyfile_path
        assert path == Path.home() / "wallet.json"

    def test_save_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = SDKConfig(
            codec=CodecConfig(strict_decode=True),
            wallet=WalletConfig(keyfile=str(tmp_path / "w.json")),
        )
        config.log.level = "DEBUG"
        config.save(str(path))

        loaded = SDKConfig.load(str(path))
        assert loaded.to_dict() == config.to_dict()
        assert loaded.codec.strict_decode is True

    def test_load_partial(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"codec": {"strict_decode": True}}))

        loaded = SDKConfig.load(str(path))
        assert loaded.codec.strict_decode is True
        assert loaded.log == LogConfig()
        assert loaded.wallet == WalletConfig()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_file_handler(self, tmp_path):
        root = logging.getLogger()
        saved = root.handlers[:]
        saved_level = root.level
        root.handlers = []
        try:
            log_file = tmp_path / "kodechain.log"
            setup_logging(LogConfig(level="DEBUG", file=str(log_file)))

            assert root.level == logging.DEBUG
            assert any(
                isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers
            )

            logging.getLogger("kodechain.test").info("configured")
            for handler in root.handlers:
                handler.flush()
            assert "configured" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved
            root.setLevel(saved_level)
