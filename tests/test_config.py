from __future__ import annotations

import importlib
import logging
import os

import sora_video.config as config


def _restore(name: str, original: str | None) -> None:
    if original is None:
        os.environ.pop(name, None)
    else:
        os.environ[name] = original


def test_settings_reads_sora_environment(monkeypatch):
    originals = {name: os.environ.get(name) for name in ("SORA_BASE_URL", "SORA_API_KEY", "SORA_MODEL")}
    monkeypatch.setenv("SORA_BASE_URL", "https://videos.example.com/v1")
    monkeypatch.setenv("SORA_API_KEY", "sk-test")
    monkeypatch.setenv("SORA_MODEL", "sora-2-pro")

    config.get_settings.cache_clear()
    reloaded = importlib.reload(config)

    try:
        assert reloaded.settings.sora_base_url == "https://videos.example.com/v1"
        assert reloaded.settings.sora_api_key == "sk-test"
        assert reloaded.settings.sora_model == "sora-2-pro"
    finally:
        for name, original in originals.items():
            _restore(name, original)
        importlib.reload(config)


def test_settings_falls_back_to_openai_key(monkeypatch):
    originals = {name: os.environ.get(name) for name in ("SORA_API_KEY", "OPENAI_API_KEY")}
    monkeypatch.delenv("SORA_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")

    reloaded = importlib.reload(config)

    try:
        assert reloaded.settings.sora_api_key == "sk-openai"
    finally:
        for name, original in originals.items():
            _restore(name, original)
        importlib.reload(config)


def test_configure_logging_uses_requested_level(monkeypatch):
    calls = {}

    def fake_basic_config(**kwargs):  # noqa: ANN003
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    config.configure_logging("debug")
    assert calls == {"level": "DEBUG"}
