# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest


def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip tests on large documents")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run tests on large documents")


def pytest_collection_modifyitems(config, items):
    # Tests on large documents request the `slow` fixture
    if config.getoption("--slow"):
        skip = pytest.mark.skip(reason="--slow: only large document tests")
        for item in items:
            if 'slow' not in item.fixturenames:
                item.add_marker(skip)
