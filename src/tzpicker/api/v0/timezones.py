# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

from ujson import dumps as json_dumps

from ...timezones import get_timezones


def on_get(req, resp):
    """
    Get the supported timezones.

    **Example request**:

    .. sourcecode:: http

       GET /api/v0/timezones HTTP/1.1
       Host: example.com

    **Example response:**

    .. sourcecode:: http

        HTTP/1.1 200 OK
        Content-Type: application/json

        [
            "America/Los_Angeles",
            "America/New_York",
            "Asia/Tokyo",
            "Australia/Sydney",
            "Europe/Berlin",
            "Europe/London",
            "Europe/Stockholm"
        ]
    """
    resp.text = json_dumps(list(get_timezones()), escape_forward_slashes=False)
