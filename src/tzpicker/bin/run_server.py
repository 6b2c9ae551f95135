#!/usr/bin/env python

# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

# Must run before anything else imports ssl or socket.
import gevent.monkey

gevent.monkey.patch_all()

import argparse
import logging
import multiprocessing
import sys
from typing import Any, Dict

import gunicorn.app.base

import tzpicker.app
import tzpicker.utils

log = logging.getLogger(__name__)


def build_gunicorn_options(app_config: Dict[str, Any]) -> Dict[str, Any]:
    """Builds the Gunicorn options dictionary from the app config."""
    server_cfg = app_config.get("server") or {}
    if not isinstance(server_cfg, dict):
        log.error("Invalid format in 'server' section of config file.")
        sys.exit(1)
    host = server_cfg.get("host", "127.0.0.1")
    port = server_cfg.get("port", 8080)

    gunicorn_cfg = app_config.get("gunicorn") or {}
    if not isinstance(gunicorn_cfg, dict):
        log.error("Invalid format in 'gunicorn' section of config file.")
        sys.exit(1)

    options = {
        "preload_app": False,
        "reload": False,
        "worker_class": "gevent",
        "accesslog": "-",
        "errorlog": "-",
        "workers": multiprocessing.cpu_count(),
    }

    options.update(gunicorn_cfg)

    # bind always comes from the 'server' section
    options["bind"] = f"{host}:{port}"

    return options


class StandaloneApplication(gunicorn.app.base.BaseApplication):
    """
    Gunicorn application class for running tzpicker standalone.
    """

    def __init__(self, app_config: Dict[str, Any]):
        """
        Initialize the Gunicorn application.

        Args:
            app_config: The application configuration dictionary loaded from the config file.
        """
        self.app_config = app_config
        self.options = build_gunicorn_options(app_config)
        # BaseApplication.__init__ calls load_config, so options must be set first.
        super().__init__()

    def load_config(self) -> None:
        """Loads Gunicorn configuration settings from the prepared options."""
        config = {
            key: value
            for key, value in self.options.items()
            if key in self.cfg.settings and value is not None
        }
        for key, value in config.items():
            self.cfg.set(key.lower(), value)

    def load(self) -> Any:
        """Loads the WSGI application."""
        log.info("Loading tzpicker WSGI application.")
        return tzpicker.app.get_wsgi_app(self.app_config)


def main() -> None:
    """Parses arguments, loads configuration, and runs the Gunicorn server."""
    tzpicker.utils.init_logging()

    parser = argparse.ArgumentParser(
        description="Run the tzpicker API using Gunicorn."
    )
    parser.add_argument(
        "config_file",
        help="Path to the tzpicker configuration file (e.g., config.yaml).",
    )
    args = parser.parse_args()

    log.info(f"Loading configuration from: {args.config_file}")
    try:
        config = tzpicker.utils.read_config(args.config_file)
    except tzpicker.utils.ConfigError as e:
        log.error(str(e))
        sys.exit(1)

    log.info("Initializing Gunicorn server...")
    StandaloneApplication(config).run()


if __name__ == "__main__":
    main()
