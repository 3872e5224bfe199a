"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def single_line_object():
    """Single-line JSON-like object."""
    return '{ "name": "Alice", "age": 30 }'


@pytest.fixture
def multi_line_object():
    """Multi-line JSON-like object."""
    return '{\n  "name": "Alice",\n  "age": 30\n}'


@pytest.fixture
def indented_blocks():
    """Indented multi-line blocks separated by commas."""
    return "\n".join([
        '            {',
        '                "name": "content",',
        '                "regexp": "*"',
        '            },',
        '            {',
        '                "name": "filename",',
        '                "regexp": "*"',
        '            },',
    ])
