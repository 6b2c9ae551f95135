#!/usr/bin/env python

# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

import argparse

from ujson import dumps as json_dumps

from tzpicker.timezones import get_timezones


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the supported timezones, one per line."
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the timezones as a JSON array instead.",
    )
    args = parser.parse_args(argv)

    if args.json:
        print(json_dumps(list(get_timezones()), escape_forward_slashes=False))
    else:
        for tz in get_timezones():
            print(tz)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
