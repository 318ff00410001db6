"""
Tests for settings loading.
"""

import logging
from datetime import time
from types import SimpleNamespace

import pytest

import config
from config import Settings, load_settings, parse_bool, parse_hhmm, parse_paydays

KEYS = (
    'PAYDAYS', 'PAYDAY_TODAY_IS_PASSED', 'LUNAR_TODAY_IS_PASSED', 'HOLIDAY_LIMIT',
    'WORK_START', 'WORK_END', 'OPENING_STRATEGY', 'SHOW_RATING', 'REFRESH_SECONDS',
)


@pytest.fixture()
def secrets(monkeypatch):
    """Empty secrets and a clean environment; tests fill in what they need."""
    values = {}
    monkeypatch.setattr(config, 'st', SimpleNamespace(secrets=values))
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    return values


def test_defaults(secrets):
    assert load_settings() == Settings()


def test_get_secret_prefers_secrets_over_environment(secrets, monkeypatch):
    secrets['HOLIDAY_LIMIT'] = 3
    monkeypatch.setenv('HOLIDAY_LIMIT', '5')
    assert config.get_secret('HOLIDAY_LIMIT') == 3
    assert load_settings().holiday_limit == 3


def test_get_secret_falls_back_to_environment(secrets, monkeypatch):
    monkeypatch.setenv('OPENING_STRATEGY', 'Day_Of_Year')
    assert config.get_secret('OPENING_STRATEGY') == 'Day_Of_Year'
    assert config.get_secret('MISSING', 'x') == 'x'
    assert load_settings().opening_strategy == 'day_of_year'


def test_environment_values(secrets, monkeypatch):
    monkeypatch.setenv('PAYDAYS', '15, 30')
    monkeypatch.setenv('PAYDAY_TODAY_IS_PASSED', 'false')
    monkeypatch.setenv('SHOW_RATING', 'off')
    monkeypatch.setenv('WORK_START', '10:00')
    monkeypatch.setenv('WORK_END', '19:30')

    settings = load_settings()

    assert settings.paydays == (15, 30)
    assert settings.payday_today_is_passed is False
    assert settings.lunar_today_is_passed is True
    assert settings.show_rating is False
    assert settings.work_start == time(10, 0)
    assert settings.work_end == time(19, 30)


def test_secret_values_keep_their_types(secrets):
    secrets['PAYDAYS'] = [5, 20]
    secrets['SHOW_RATING'] = False
    settings = load_settings()
    assert settings.paydays == (5, 20)
    assert settings.show_rating is False


def test_invalid_value_is_logged_and_replaced(secrets, monkeypatch, caplog):
    monkeypatch.setenv('PAYDAYS', '0,5')
    monkeypatch.setenv('REFRESH_SECONDS', 'soon')
    with caplog.at_level(logging.WARNING, logger='config'):
        settings = load_settings()
    assert settings.paydays == Settings().paydays
    assert settings.refresh_seconds == 1
    assert 'PAYDAYS' in caplog.text
    assert 'REFRESH_SECONDS' in caplog.text


def test_inverted_work_window_uses_defaults(secrets, monkeypatch, caplog):
    monkeypatch.setenv('WORK_START', '18:00')
    monkeypatch.setenv('WORK_END', '09:00')
    with caplog.at_level(logging.WARNING, logger='config'):
        settings = load_settings()
    assert (settings.work_start, settings.work_end) == (time(9, 0), time(18, 0))
    assert 'WORK_START' in caplog.text


@pytest.mark.parametrize("value", ["9", "25:00", "12:60", "ab:cd", "9:00:00"])
def test_parse_hhmm_rejects(value):
    with pytest.raises(ValueError):
        parse_hhmm(value)


def test_parse_hhmm():
    assert parse_hhmm(" 08:05 ") == time(8, 5)


@pytest.mark.parametrize("value", ["", "3,3", "32", "1,x"])
def test_parse_paydays_rejects(value):
    with pytest.raises(ValueError):
        parse_paydays(value)


def test_parse_bool_rejects_garbage():
    with pytest.raises(ValueError):
        parse_bool("maybe")
