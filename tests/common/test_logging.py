import logging

from mediameta.common.logging import get_logger


def test_get_logger_named_and_leveled():
    log = get_logger("mediameta.test", level="debug")
    assert log.name == "mediameta.test"
    assert log.level == logging.DEBUG


def test_get_logger_uses_configured_level(monkeypatch):
    from mediameta.common.settings import get_settings

    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    assert get_logger("mediameta.test2").level == logging.WARNING
