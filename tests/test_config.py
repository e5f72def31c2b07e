"""Tests for configuration and logging setup."""

import logging
from dataclasses import dataclass, field

import pytest

from form_fields import config as config_module
from form_fields.config import FormFieldsConfig, get_config, update_config
from form_fields.logs import LOGGER_NAME, disable_logging, enable_logging, setup_logging
from form_fields.projector import FieldProjector


@pytest.fixture
def restore_config():
    saved = config_module.config
    config_module.config = FormFieldsConfig()
    yield config_module.config
    config_module.config = saved


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    enable_logging()


class TestFormFieldsConfig:
    """Tests for FormFieldsConfig."""

    def test_defaults(self):
        config = FormFieldsConfig()
        assert config.tag_name == "form"
        assert config.default_input_type == "text"
        assert config.path_separator == "."
        assert config.strict_types is True

    def test_from_env(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("FORM_FIELDS_TAG_NAME", "html")
        monkeypatch.setenv("FORM_FIELDS_DEFAULT_TYPE", "textarea")
        monkeypatch.setenv("FORM_FIELDS_PATH_SEPARATOR", "__")
        monkeypatch.setenv("FORM_FIELDS_STRICT_TYPES", "false")
        monkeypatch.setenv("FORM_FIELDS_LOG_LEVEL", "debug")
        config = FormFieldsConfig.from_env()
        assert config.tag_name == "html"
        assert config.default_input_type == "textarea"
        assert config.path_separator == "__"
        assert config.strict_types is False
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "FORM_FIELDS_TAG_NAME",
            "FORM_FIELDS_DEFAULT_TYPE",
            "FORM_FIELDS_PATH_SEPARATOR",
            "FORM_FIELDS_STRICT_TYPES",
            "FORM_FIELDS_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        assert FormFieldsConfig.from_env() == FormFieldsConfig()

    def test_update_config(self, restore_config):
        """Test known keys are updated and unknown keys ignored."""
        config = update_config(path_separator="/", unknown="x")
        assert config.path_separator == "/"
        assert not hasattr(config, "unknown")
        assert get_config() is config

    def test_projector_uses_config(self, restore_config):
        """Test projector defaults come from the current config."""

        @dataclass
        class Inner:
            city: str = ""

        @dataclass
        class Outer:
            name: str = ""
            inner: Inner = field(default_factory=Inner)

        update_config(path_separator="__", default_input_type="search")
        fields = FieldProjector().project(Outer())
        assert [(f.name, f.type) for f in fields] == [
            ("name", "search"),
            ("inner__city", "search"),
        ]

    def test_projector_arguments_override_config(self, restore_config):
        update_config(strict_types=False)
        assert FieldProjector(strict_types=True).strict_types is True
        assert FieldProjector().strict_types is False

    def test_empty_string_arguments_override_config(self, restore_config):
        """Test an explicit empty string is used rather than the config value."""

        @dataclass
        class Inner:
            city: str = ""

        @dataclass
        class Outer:
            inner: Inner = field(default_factory=Inner)

        update_config(path_separator="__", default_input_type="search")
        projector = FieldProjector(path_separator="", default_input_type="")
        assert projector.path_separator == ""
        assert projector.default_input_type == ""
        (result,) = projector.project(Outer())
        assert result.name == "innercity"
        assert result.type == ""


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_level(self, restore_logger):
        logger = setup_logging(level="DEBUG", console=False)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_setup_logging_file(self, restore_logger, tmp_path):
        """Test records are written to the requested file."""
        log_file = tmp_path / "form-fields.log"
        logger = setup_logging(level="INFO", console=False, file_path=str(log_file))
        logger.info("projected")
        for handler in logger.handlers:
            handler.flush()
        assert "projected" in log_file.read_text()

    def test_disable_logging(self, restore_logger):
        setup_logging(enabled=False)
        assert restore_logger.disabled
        enable_logging()
        assert not restore_logger.disabled

    def test_disable_logging_direct(self, restore_logger):
        disable_logging()
        assert restore_logger.disabled
