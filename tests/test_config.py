"""Tests for configuration module."""

import dataclasses
import logging

import pytest

from rsef.config import (
    DEFAULT_OPTIONS,
    REGISTRY_URLS,
    ParseOptions,
    setup_logging,
)
from rsef.models import Registry


def test_registry_urls_defined():
    """Test that every registry has a listing URL."""
    for registry in Registry:
        assert registry.value in REGISTRY_URLS
        assert REGISTRY_URLS[registry.value].startswith("https://")
        assert "{day}" in REGISTRY_URLS[registry.value]


def test_default_options():
    """Test that defaults are lenient about legacy lines and summaries."""
    assert DEFAULT_OPTIONS.allow_legacy_version is True
    assert DEFAULT_OPTIONS.strict_summaries is False
    assert DEFAULT_OPTIONS == ParseOptions()


def test_options_are_immutable():
    """Test that options cannot be changed after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.strict_summaries = True


def test_setup_logging():
    """Test that setup_logging configures logging without errors."""
    # Clear any existing logging configuration
    logger = logging.getLogger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    setup_logging()

    assert logger.level == logging.INFO
    assert len(logger.handlers) > 0

    handler = logger.handlers[0]
    assert handler.formatter is not None
