# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT
from os.path import abspath, dirname, join
from subprocess import SubprocessError
# File for tracking the application version

PROJECT_ROOT = dirname(dirname(abspath(__file__)))

try:
    from setuptools_scm import get_version
    __version__ = get_version(root=PROJECT_ROOT)

except (ImportError, LookupError, OSError, ValueError, SubprocessError):
    try:
        with open(join(PROJECT_ROOT, "version.txt"), "r") as f:
            __version__ = f.read().strip()
    except (FileNotFoundError, IOError):
        __version__ = "0.0.0"
