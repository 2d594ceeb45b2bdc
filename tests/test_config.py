"""Tests for environment configuration."""

import dataclasses

import pytest

from pixabay.config import (
    DEFAULT_TIMEOUT_S,
    IMAGE_ENDPOINT,
    VIDEO_ENDPOINT,
    PixabayConfig,
    load_config,
)


def test_load_config_reads_key_and_timeout():
    config = load_config({"PIXABAY_API_KEY": "abc123", "PIXABAY_TIMEOUT_S": "2.5"})
    assert config.api_key == "abc123"
    assert config.timeout_s == 2.5
    assert config.image_endpoint == IMAGE_ENDPOINT
    assert config.video_endpoint == VIDEO_ENDPOINT


def test_missing_key_does_not_fail_loading():
    config = load_config({})
    assert config.api_key == ""
    assert config.has_credential is False


def test_blank_key_counts_as_missing():
    assert load_config({"PIXABAY_API_KEY": "   "}).has_credential is False


@pytest.mark.parametrize("raw", ["", "soon", "0", "-3"])
def test_bad_timeout_falls_back_to_default(raw):
    assert load_config({"PIXABAY_TIMEOUT_S": raw}).timeout_s == DEFAULT_TIMEOUT_S


def test_load_config_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PIXABAY_API_KEY", "from-env")
    monkeypatch.delenv("PIXABAY_TIMEOUT_S", raising=False)
    assert load_config().api_key == "from-env"


def test_config_is_immutable():
    config = PixabayConfig(api_key="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"


def test_repr_hides_the_key():
    assert "supersecret" not in repr(PixabayConfig(api_key="supersecret"))
