"""
Configuration module for form-fields.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from form_fields.constants import (
    DEFAULT_INPUT_TYPE,
    DEFAULT_PATH_SEPARATOR,
    DEFAULT_TAG_NAME,
)

# Load environment variables
load_dotenv()


@dataclass
class FormFieldsConfig:
    """Configuration settings for form-fields."""

    # Metadata key holding a field's annotation string
    tag_name: str = DEFAULT_TAG_NAME

    # Projection defaults
    default_input_type: str = DEFAULT_INPUT_TYPE
    path_separator: str = DEFAULT_PATH_SEPARATOR

    # Raise on list/dict/... fields instead of dropping them
    strict_types: bool = True

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "FormFieldsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            tag_name=os.getenv("FORM_FIELDS_TAG_NAME", _defaults.tag_name),
            default_input_type=os.getenv("FORM_FIELDS_DEFAULT_TYPE", _defaults.default_input_type),
            path_separator=os.getenv("FORM_FIELDS_PATH_SEPARATOR", _defaults.path_separator),
            strict_types=os.getenv("FORM_FIELDS_STRICT_TYPES", str(_defaults.strict_types).lower()).lower() == "true",
            log_level=os.getenv("FORM_FIELDS_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormFieldsConfig.from_env()


def get_config() -> FormFieldsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormFieldsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config


def reset_config() -> FormFieldsConfig:
    """Reload configuration from the environment."""
    global config
    config = FormFieldsConfig.from_env()
    return config
