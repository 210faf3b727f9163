# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "0.1.0"

_version_pattern = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:(a|b|rc)(\d+))?$")

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate", None: "final"}


def parse_version(version):
    "Split a version string like 1.2.0rc1 into a VersionInfo."
    major, minor, micro, level, serial = _version_pattern.match(version).groups()
    return VersionInfo(int(major), int(minor), int(micro),
                       _release_levels[level], int(serial or 0))


version_info = parse_version(__version__)
