# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import logging

import falcon

from . import api, healthcheck
from .timezones import check_timezones, get_timezones

logger = logging.getLogger(__name__)

application = None


def init(config):
    """Builds the Falcon application and registers every route."""
    global application

    for problem in check_timezones(get_timezones()):
        logger.warning(problem)

    application = falcon.App()
    api.init(application, config)
    healthcheck.init(application, config)
    logger.info("Serving %d timezones", len(get_timezones()))
    return application


def get_wsgi_app(config=None):
    if config is None:
        config = {}
    return init(config)
