"""Pytest configuration for integration tests."""

import os

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def pytest_collection_modifyitems(config, items):
    """Skip provider tests when no key is configured."""
    if os.getenv("OPENAI_API_KEY"):
        return
    skip = pytest.mark.skip(reason="OPENAI_API_KEY not set")
    for item in items:
        if "requires_openai_api" in item.keywords:
            item.add_marker(skip)
