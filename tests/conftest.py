# -*- coding: utf-8 -*-
""" Global fixtures """

import os

import pytest


@pytest.fixture
def fixture_file():
    """ Helper to load fixture files by name. """

    def load(name):
        filepath = os.path.join(os.path.dirname(__file__), "fixtures", name)
        with open(filepath, "rb") as f:
            return f.read().decode("utf-8")

    return load


@pytest.fixture
def kitchen_sink(fixture_file):
    return fixture_file("schema-kitchen-sink.graphql")
