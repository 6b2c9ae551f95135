# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import logging

from falcon import HTTPNotFound

logger = logging.getLogger(__name__)


class HealthCheck(object):

    def __init__(self, config):
        self.path = None
        if config.get("debug"):
            self.dummy_status = "GOOD"
        else:
            self.dummy_status = None
            path = config.get("healthcheck_path")
            if not path:
                self.dummy_status = "BAD"
            else:
                self.path = path

    def on_get(self, req, resp):
        """
        Health check endpoint. Reports a fixed status or the first line of the
        configured healthcheck file.
        """
        if self.dummy_status:
            status = self.dummy_status
        else:
            try:
                with open(self.path) as f:
                    status = f.readline().strip()
            except IOError as e:
                logger.error("Could not open healthcheck file '%s': %s", self.path, e)
                raise HTTPNotFound(description=f"Healthcheck file '{self.path}' not found or readable")

        resp.content_type = "text/plain"
        resp.text = status


def init(application, config):
    application.add_route("/healthcheck", HealthCheck(config))
