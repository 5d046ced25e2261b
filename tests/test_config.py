"""
Test cases for artspace configuration.
"""

import logging

import pytest

from artspace import config


@pytest.mark.parametrize("name", ["PROJECT_ROOT", "DATA_DIR", "ARTIFACTS_DIR", "DEFAULT_LAYOUT_OUTPUT"])
def test_no_unused_path_settings(name):
    """The CLI takes explicit paths, so config carries no path defaults."""
    assert not hasattr(config, name)


def test_defaults():
    assert config.REDUCER_METHOD in ("pca", "random_projection", "umap")
    assert config.MIN_EPS > 0
    assert "none" in config.COLOR_BY_OPTIONS


def test_configure_logging_attaches_one_handler():
    logger = config.configure_logging("debug")
    config.configure_logging("debug")

    assert logger.name == "artspace"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
