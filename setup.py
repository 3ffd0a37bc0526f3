#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDIME_PATH = HERE / "jsondime"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JSONDIME_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="jsondime",
      version=VERSION,
      description="Structural diff, merge and patch of JSON documents",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(exclude=["jsondime.tests", "jsondime.tests.*"]),
      package_data={
          "jsondime": ["*.schema.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "jsondime = jsondime.__main__:main_dispatch",
              "jsondime-diff = jsondime.jsondiffapp:main",
              "jsondime-merge = jsondime.jsonmergeapp:main",
              "jsondime-patch = jsondime.jsonpatchapp:main",
              "jsondime-show = jsondime.jsonshowapp:main",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )
