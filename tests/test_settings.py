import logging

from predictionio.utils.logger import get_logger
from predictionio.utils.settings import Settings


def test_defaults_when_env_is_empty():
    settings = Settings.from_env({})

    assert settings == Settings(
        engine_url="http://localhost:8000",
        event_url="http://localhost:7070",
        access_key="",
        log_level="INFO",
    )


def test_reads_pio_variables():
    settings = Settings.from_env(
        {
            "PIO_ENGINE_URL": "http://engine:8000",
            "PIO_EVENT_URL": "http://events:7070",
            "PIO_ACCESS_KEY": " key ",
            "PIO_LOG_LEVEL": "debug",
        }
    )

    assert settings.engine_url == "http://engine:8000"
    assert settings.event_url == "http://events:7070"
    assert settings.access_key == "key"
    assert settings.log_level == "DEBUG"


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PIO_ENGINE_URL", "http://from-os:8000")

    assert Settings.from_env().engine_url == "http://from-os:8000"


def test_get_logger_attaches_single_handler():
    logger = get_logger("predictionio.test-handlers")
    again = get_logger("predictionio.test-handlers", level="debug")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
