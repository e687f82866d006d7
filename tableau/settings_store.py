import configparser
import logging
from pathlib import Path

from tableau.ui_config import FONT_SCALE_ORDER, THEME_ORDER

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "theme_name": "Felt",
    "font_scale": "Normal",
    "width": "1000",
    "height": "700",
}

MIN_WIDTH = 400
MIN_HEIGHT = 300


def _as_size(value, default, minimum):
    try:
        size = int(value)
    except (TypeError, ValueError):
        return default
    return str(max(minimum, size))


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update(settings)

    if data["theme_name"] not in THEME_ORDER:
        data["theme_name"] = DEFAULT_SETTINGS["theme_name"]
    if data["font_scale"] not in FONT_SCALE_ORDER:
        data["font_scale"] = DEFAULT_SETTINGS["font_scale"]
    data["width"] = _as_size(data["width"], DEFAULT_SETTINGS["width"], MIN_WIDTH)
    data["height"] = _as_size(data["height"], DEFAULT_SETTINGS["height"], MIN_HEIGHT)
    return {k: data[k] for k in DEFAULT_SETTINGS}


def load_settings(path=None):
    path = Path(path) if path is not None else SETTINGS_PATH
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return dict(DEFAULT_SETTINGS)
    if "ui" not in parser:
        return dict(DEFAULT_SETTINGS)
    raw = {key: parser["ui"].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    return _sanitize(raw)


def save_settings(settings, path=None):
    path = Path(path) if path is not None else SETTINGS_PATH
    parser = configparser.ConfigParser()
    parser["ui"] = _sanitize(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)
