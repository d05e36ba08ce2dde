import logging

from panel_chrome.logging_config import setup_logging
from panel_chrome.models import DEFAULT_CORNER_RADIUS, ChromeConfig


def test_defaults_without_environment() -> None:
    cfg = ChromeConfig.from_env({})
    assert cfg.corner_radius == DEFAULT_CORNER_RADIUS
    assert cfg.orientation_enabled is None
    assert cfg.log_level == "INFO"


def test_environment_overrides() -> None:
    cfg = ChromeConfig.from_env(
        {
            "PANEL_CHROME_CORNER_RADIUS": "12.5",
            "PANEL_CHROME_ORIENTATION": "on",
            "PANEL_CHROME_LOG_LEVEL": "debug",
        }
    )
    assert cfg.corner_radius == 12.5
    assert cfg.orientation_enabled is True
    assert cfg.log_level == "DEBUG"


def test_negative_radius_is_clamped_to_zero() -> None:
    cfg = ChromeConfig.from_env({"PANEL_CHROME_CORNER_RADIUS": "-3"})
    assert cfg.corner_radius == 0


def test_malformed_values_fall_back_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="panel_chrome.models"):
        cfg = ChromeConfig.from_env(
            {
                "PANEL_CHROME_CORNER_RADIUS": "round",
                "PANEL_CHROME_ORIENTATION": "sometimes",
                "PANEL_CHROME_LOG_LEVEL": "chatty",
            }
        )

    assert cfg == ChromeConfig()
    assert len(caplog.records) == 3


def test_orientation_auto_and_off() -> None:
    auto = ChromeConfig.from_env({"PANEL_CHROME_ORIENTATION": "auto"})
    off = ChromeConfig.from_env({"PANEL_CHROME_ORIENTATION": "0"})
    assert auto.orientation_enabled is None
    assert off.orientation_enabled is False


def test_setup_logging_is_idempotent(tmp_path) -> None:
    log_file = tmp_path / "chrome.log"
    setup_logging("DEBUG", str(log_file))
    logger = setup_logging("DEBUG", str(log_file))

    assert logger.name == "panel_chrome"
    assert len(logger.handlers) == 2
    logging.getLogger("panel_chrome.shapes").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
