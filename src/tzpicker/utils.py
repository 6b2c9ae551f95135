# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import logging
import logging.handlers
import os
import sys
from importlib import import_module

import yaml

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_FILE_ENV = "TZPICKER_LOG_FILE"


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""


def read_config(config_path):
    """
    Loads a YAML config file into a dict.

    If the config names an ``init_config_hook`` module, the function of the
    same name inside it is called with the config so it can fill in values
    (secrets, environment specific settings) before the app starts.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as h:
            config = yaml.safe_load(h)
    except OSError as e:
        raise ConfigError("Could not read config file %s: %s" % (config_path, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in config file %s: %s" % (config_path, e)) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError("Config file %s did not load as a mapping" % config_path)

    if "init_config_hook" in config:
        module = config["init_config_hook"]
        try:
            logger.info("Bootstrapping config using %s", module)
            getattr(import_module(module), module.split(".")[-1])(config)
        except (ImportError, AttributeError):
            logger.exception("Failed loading config hook %s", module)

    return config


def init_logging(level=logging.INFO):
    """Configures the root logger for the command line entry points."""
    formatter = logging.Formatter(LOG_FORMAT)
    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        ch = logging.handlers.RotatingFileHandler(
            log_file, mode="a", maxBytes=10485760, backupCount=10
        )
    else:
        ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(ch)
    return ch
