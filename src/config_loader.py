#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Salted Hash ID Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/config_loader.py

"""
Configuration Loader (config_loader.py)

Loads the hash ID settings used by the command-line front end. The codec
itself never reads configuration; callers resolve the settings here and pass
plain values to `HashIdEngine`.

Key Features:
-   **Loads `config.ini`**: Parses the configuration file found at the project
    root (or at the path in `HASHID_CONFIG_OVERRIDE`) into a
    `configparser.ConfigParser`. Interpolation is disabled so that `%` can
    appear in an alphabet.
-   **Loads `.env`**: Loads environment variables from a `.env` file at the
    project root. `HASHIDS_SALT` keeps the salt out of version control and
    overrides the configured one.
-   **Safe Value Retrieval**: `get_config_value()` provides typed access to
    config values with fallbacks, type conversion (str, int, float, bool) and
    optional stripping of inline comments.

Expected config.ini layout:

    [HashIds]
    alphabet = abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890
    salt = this is my salt
    min_length = 8

Usage by other scripts:
    from config_loader import load_app_config, get_engine_settings

    settings = get_engine_settings(load_app_config())
    engine = HashIdEngine(**settings)
"""

import configparser
import logging
import os
import pathlib

from dotenv import load_dotenv

from alphabet_deriver import DEFAULT_ALPHABET

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"
CONFIG_SECTION = "HashIds"
SALT_ENV_VAR = "HASHIDS_SALT"

logger = logging.getLogger(__name__)


def get_project_root() -> str:
    """
    Determines the project root by searching upwards for pyproject.toml.

    Falls back to the current working directory when the module is installed
    outside of a source checkout.
    """
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return os.getcwd()


def load_app_config(config_path: str = None) -> configparser.ConfigParser:
    """Reads config.ini, or an explicit/overridden path, into a ConfigParser."""
    config = configparser.ConfigParser(interpolation=None)

    if config_path is None:
        override_path = os.getenv('HASHID_CONFIG_OVERRIDE')
        if override_path and os.path.exists(override_path):
            config_path = override_path
            logger.debug(f"Using override config from env var: {config_path}")
        else:
            config_path = os.path.join(get_project_root(), CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' also accepts files saved with a BOM.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using defaults.")

    return config


def load_env_vars(dotenv_path: str = None) -> bool:
    """Loads environment variables from the .env file at the project root."""
    if dotenv_path is None:
        dotenv_path = os.path.join(get_project_root(), DOTENV_FILENAME)
    if not os.path.exists(dotenv_path):
        logger.debug(f".env file not found at {dotenv_path}.")
        return False
    if load_dotenv(dotenv_path):
        logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
        return True
    logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
    return False


def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str, strip_comments=True):
    """
    Helper to get a typed value from a configparser.ConfigParser object,
    with a fallback, type conversion and stripping of inline comments.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: The value to return if the key is missing or conversion fails.
        value_type (type): The expected type (str, int, float, bool).
        strip_comments (bool): Strip text after ';' or '#'. Turn off for
                               values where those are legal characters.

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)
    cleaned_value = raw_value
    if strip_comments:
        for comment_char in [';', '#']:
            if comment_char in cleaned_value:
                cleaned_value = cleaned_value.split(comment_char, 1)[0].strip()

    if value_type == str:
        return cleaned_value
    elif value_type == int:
        try:
            return int(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to int. Using fallback: {fallback}")
            return fallback
    elif value_type == float:
        try:
            return float(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to float. Using fallback: {fallback}")
            return fallback
    elif value_type == bool:
        try:
            return config.getboolean(section, key)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to bool. Using fallback: {fallback}")
            return fallback

    logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
    return fallback


def get_engine_settings(config: configparser.ConfigParser) -> dict:
    """
    Resolves the engine settings from a loaded config and the environment.

    Returns:
        dict: `alphabet`, `salt` and `min_length`, ready to be passed to
              HashIdEngine as keyword arguments.
    """
    alphabet = get_config_value(config, CONFIG_SECTION, 'alphabet', DEFAULT_ALPHABET, strip_comments=False)
    salt = get_config_value(config, CONFIG_SECTION, 'salt', "", strip_comments=False)
    min_length = get_config_value(config, CONFIG_SECTION, 'min_length', 0, value_type=int)

    env_salt = os.getenv(SALT_ENV_VAR)
    if env_salt is not None:
        logger.debug(f"Using salt from the {SALT_ENV_VAR} environment variable.")
        salt = env_salt

    return {'alphabet': alphabet, 'salt': salt, 'min_length': min_length}

# === End of src/config_loader.py ===
