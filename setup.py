"""Python packaging information for cpinspect.

Project metadata and dependencies are declared in pyproject.toml; this file is retained so that
older tooling can still perform an editable install of a working copy:

    pip install -e /path/to/working/copy[tests]

"""

from setuptools import setup

setup()
