"""Shared fixtures for core unit tests"""

import pytest

from blogpub.core.parse import make_parser, parse_tree


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="tree_of")
def tree_of_fixture(parser):
    """Parse markdown text into a syntax tree."""
    return lambda md: parse_tree(parser.parse(md))
