from __future__ import annotations

import logging

import pytest

from mindmap.app.settings import AppSettings
from mindmap.utils import logging as logging_utils


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("MINDMAP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MINDMAP_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield monkeypatch
    root.setLevel(previous)


def test_debug_setting_used_without_env(clean_env) -> None:
    assert logging_utils.apply_debug_setting(True) == logging.DEBUG
    assert logging_utils.apply_debug_setting(False) == logging.INFO
    assert logging_utils.env_forces_debug() is False
    assert AppSettings.defaults().debug_logging is False


def test_explicit_level_overrides_debug_setting(clean_env) -> None:
    clean_env.setenv("MINDMAP_LOG_LEVEL", "warning")
    clean_env.setenv("MINDMAP_DEBUG", "1")
    assert logging_utils.apply_debug_setting(True) == logging.WARNING
    assert logging_utils.env_forces_debug() is False


@pytest.mark.parametrize("raw, expected", [("15", 15), (" error ", logging.ERROR)])
def test_level_env_accepts_names_and_numbers(clean_env, raw, expected) -> None:
    clean_env.setenv("MINDMAP_LOG_LEVEL", raw)
    assert logging_utils.configure_root() == expected
    assert logging.getLogger().level == expected


def test_unknown_level_name_falls_back_to_debug_flag(clean_env) -> None:
    clean_env.setenv("MINDMAP_LOG_LEVEL", "chatty")
    assert logging_utils.env_log_level() is None

    clean_env.setenv("MINDMAP_DEBUG", "yes")
    assert logging_utils.env_log_level() == logging.DEBUG
    assert AppSettings.defaults().debug_logging is True
