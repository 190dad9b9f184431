"""
Unit Tests for Configuration and Logging
"""

import logging

import pytest
from openclaw.config import DEFAULT_DEPTH, EngineConfig
from openclaw.log import setup_logger


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.depth == DEFAULT_DEPTH == 3
        assert config.maximizing is False
        assert config.prune is True
        assert config.claim_draw is False
        assert config.seed is None
        assert config.side_name == "black"

    def test_white_engine(self):
        assert EngineConfig(maximizing=True).side_name == "white"

    def test_depth_zero_allowed(self):
        assert EngineConfig(depth=0).depth == 0

    def test_negative_depth(self):
        with pytest.raises(ValueError, match="non-negative"):
            EngineConfig(depth=-1)

    @pytest.mark.parametrize("depth", [2.0, "3", True, None])
    def test_non_integer_depth(self, depth):
        with pytest.raises(ValueError, match="integer"):
            EngineConfig(depth=depth)

    def test_repr(self):
        text = repr(EngineConfig(depth=2, seed=5))
        assert "depth=2" in text
        assert "side=black" in text
        assert "seed=5" in text


class TestSetupLogger:
    """Tests for logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("openclaw")
        level = logger.level
        yield
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(level)

    def test_stream_handler(self):
        logger = setup_logger("DEBUG")

        assert logger.name == "openclaw"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_replaces_handlers(self):
        setup_logger()
        logger = setup_logger()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        logger = setup_logger(logging.INFO, log_file=log_file)

        logging.getLogger("openclaw.search").info("hello from search")
        for handler in logger.handlers:
            handler.flush()

        assert "[INFO] hello from search" in log_file.read_text()
