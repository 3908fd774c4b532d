"""Shared fixtures."""

import pytest

from getdocs_extractor import extract


@pytest.fixture
def extract_dicts():
    """Extract declarations and serialize them for comparison."""
    def run(source):
        return [declaration.to_dict() for declaration in extract(source)]
    return run
