"""
Tests for configuration, settings schemas and logging setup.
"""

import io
import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from colorfamily.config import Config, config
from colorfamily.schemas import ColorInput, EngineSettings
from colorfamily.services.colors.conversions import LAB
from colorfamily.services.colors.families import (
    DEFAULT_HUE_BOUNDS, get_hue_boundaries, set_hue_boundaries, reset_hue_boundaries
)
from colorfamily.utils.logging import StructuredLogger, configure_logging, get_logger


class TestConfig:
    """Test configuration defaults and validators"""

    def test_defaults(self):
        assert config.DELTA_E_THRESHOLD == 2.0
        assert config.FALLBACK_FAMILY == "Outros"
        assert config.SKU_DIGITS == 3

    def test_validators(self):
        assert Config.validate_delta_threshold(2.0)
        assert not Config.validate_delta_threshold(0.0)
        assert Config.validate_hue_angle(0)
        assert not Config.validate_hue_angle(360)
        assert Config.validate_sku_digits(3)
        assert not Config.validate_sku_digits(0)


class TestEngineSettings:
    """Test settings exchanged with the catalog application"""

    def test_apply_merges_boundaries(self):
        settings = EngineSettings.model_validate({"deltaThreshold": 3.5, "hueBoundaries": {"azulStart": 180}})
        bounds = settings.apply()
        assert settings.delta_threshold == 3.5
        assert bounds.azul_start == 180
        assert get_hue_boundaries().vermelho_start == DEFAULT_HUE_BOUNDS.vermelho_start

    def test_apply_without_boundaries(self):
        settings = EngineSettings.model_validate({})
        assert settings.delta_threshold == 2.0
        assert settings.apply() == DEFAULT_HUE_BOUNDS

    def test_invalid_threshold(self):
        with pytest.raises(ValidationError):
            EngineSettings.model_validate({"deltaThreshold": -1})

    def test_invalid_angle(self):
        with pytest.raises(ValidationError):
            EngineSettings.model_validate({"hueBoundaries": {"azulStart": 400}})

    def test_unknown_boundary_key(self):
        settings = EngineSettings.model_validate({"hueBoundaries": {"cianoStart": 180}})
        with pytest.raises(ValidationError):
            settings.apply()

    def test_current_snapshot(self):
        dumped = EngineSettings.current(2.5).model_dump(by_alias=True)
        assert dumped["deltaThreshold"] == 2.5
        assert dumped["hueBoundaries"]["vermelhoStart"] == 345
        assert EngineSettings.model_validate(dumped).apply() == DEFAULT_HUE_BOUNDS


class TestColorInput:
    """Test the catalog color record"""

    def test_family_from_name(self):
        color = ColorInput(name="Ciano Claro", hex="#FF0000")
        assert color.family() == "Azul"
        assert color.family_code() == "AZ"

    def test_family_from_color(self):
        color = ColorInput(name="123", hex="#FFFFFF")
        assert color.family() == "Branco"
        assert color.family_code() == "BR"

    def test_lab(self):
        assert ColorInput(name="x", labL=50, labA=1, labB=2).lab() == LAB(50.0, 1.0, 2.0)
        assert ColorInput(name="x").lab() is None

    def test_no_data_uses_fallback(self):
        assert ColorInput(name="").family_code() == "OU"


@pytest.fixture
def log_messages():
    """Capture loguru output as formatted strings through an extra sink."""
    messages = []
    handler_id = logger.add(messages.append, format="{level} | {message} | {extra}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestLogging:
    """Test structured logging and sink ownership"""

    def test_singleton(self):
        assert get_logger() is get_logger()

    def test_logs_with_extra(self, log_messages):
        log = StructuredLogger()
        log.info("hue boundaries loaded", extra={"azulStart": 170})
        log.warning("plain warning")
        log.debug("debug detail", extra={"rule": "bordo"})

        assert len(log_messages) == 3
        assert log_messages[0].startswith("INFO | hue boundaries loaded")
        assert "'azulStart': 170" in log_messages[0]
        assert "'component': 'colorfamily'" in log_messages[0]
        assert log_messages[1].startswith("WARNING | plain warning")
        assert "'rule': 'bordo'" in log_messages[2]

    def test_host_sink_survives_boundary_update(self, log_messages):
        """Engine events must not remove sinks the application installed"""
        set_hue_boundaries({"azulStart": 180})
        reset_hue_boundaries()
        EngineSettings.model_validate({"deltaThreshold": 3.0}).apply()
        logger.info("host after")

        joined = "".join(log_messages)
        assert "Hue boundaries updated" in joined
        assert "'azulStart': 180.0" in joined
        assert "Hue boundaries reset to defaults" in joined
        assert "Engine settings applied" in joined
        assert log_messages[-1].startswith("INFO | host after")

    def test_configure_logging_owns_sinks(self):
        stream = io.StringIO()
        try:
            configure_logging(level="DEBUG", sink=stream)
            set_hue_boundaries(roxoStart=275)
            get_logger().debug("detail", extra={"rule": "dark_blue"})
        finally:
            logger.remove()
            logger.add(sys.stderr)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert "| INFO | Hue boundaries updated |" in lines[0]
        assert "'roxoStart': 275.0" in lines[0]
        assert "| DEBUG | detail |" in lines[1]

    def test_configure_logging_respects_level(self):
        stream = io.StringIO()
        try:
            configure_logging(level="WARNING", sink=stream)
            get_logger().info("hidden")
            get_logger().warning("shown")
        finally:
            logger.remove()
            logger.add(sys.stderr)

        output = stream.getvalue()
        assert "hidden" not in output
        assert "| WARNING | shown |" in output
