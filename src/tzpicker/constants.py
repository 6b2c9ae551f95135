# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

# A list of the most common timezone IDs that cover the entire world.
# Declaration order does not matter, the list is published sorted.
_COMMON_TIMEZONES = (
    "Europe/Stockholm",
    "Asia/Tokyo",
    "America/Los_Angeles",
    "America/New_York",
    "Europe/London",
    "Europe/Berlin",
    "Australia/Sydney",
)

# All entries are ASCII, so code point order matches locale collation here.
SUPPORTED_TIMEZONES = tuple(sorted(_COMMON_TIMEZONES))
