"""Shared fixtures for caesura tests."""

import pytest

import caesura


@pytest.fixture(scope="session")
def segmenter():
    """Load the bundled abbreviations once for all tests."""
    return caesura.load()
