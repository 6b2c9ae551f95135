# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

from . import timezones


def init(application, config):
    application.add_route("/api/v0/timezones", timezones)
