"""Unit tests for StoreConfig."""

import dataclasses

import pytest

from dirstore.components.codec import json_decoder, json_encoder, pickle_decoder, pickle_encoder
from dirstore.components.naming import lexicographic
from dirstore.core.config import DEFAULT_EXT, StoreConfig


def test_defaults():
    """Test that unset options fall back to defaults."""
    config = StoreConfig(data_dir="/tmp/data")

    assert config.ext == DEFAULT_EXT == ".dat"
    assert config.comparator is lexicographic
    assert config.encoder is pickle_encoder
    assert config.decoder is pickle_decoder
    assert config.create_dir is False


def test_empty_extension_falls_back_to_default():
    """Test that an empty extension means the default one."""
    assert StoreConfig(data_dir="/tmp/data", ext="").ext == DEFAULT_EXT


def test_custom_options_are_kept():
    """Test that configured options override defaults."""
    config = StoreConfig(
        data_dir="/tmp/data", ext=".json", encoder=json_encoder, decoder=json_decoder
    )

    assert config.ext == ".json"
    assert config.encoder is json_encoder
    assert config.decoder is json_decoder


def test_extension_with_separator_rejected():
    """Test that an extension cannot point into another directory."""
    with pytest.raises(ValueError):
        StoreConfig(data_dir="/tmp/data", ext="/x.dat")


def test_config_is_immutable():
    """Test that configuration cannot change after creation."""
    config = StoreConfig(data_dir="/tmp/data")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.ext = ".txt"
