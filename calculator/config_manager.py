# config_manager.py
import json
from pathlib import Path

from . import error as E

config_json = Path(__file__).resolve().parent.parent / "config.json"

# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "significant_digits": 10,
    "debug": False,
    "show_errors": False
}

# A float64 never carries more than 17 meaningful decimal digits
MAX_SIGNIFICANT_DIGITS = 17


def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    if not isinstance(settings_dict, dict):
        settings_dict = {}

    if key_value == "all":
        merged = dict(DEFAULT_SETTINGS)
        merged.update(settings_dict)
        return merged

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value, 0))


def validate_settings(settings_dict):
    """Raise ConfigurationError for values the engine cannot work with."""
    digits = settings_dict.get("significant_digits", DEFAULT_SETTINGS["significant_digits"])
    # bool is a subclass of int, but 'true' digits make no sense
    if isinstance(digits, bool) or not isinstance(digits, int) or not 1 <= digits <= MAX_SIGNIFICANT_DIGITS:
        raise E.ConfigurationError(E.ERROR_MESSAGES["5000"] + f"significant_digits={digits!r}")

    for flag in ("debug", "show_errors"):
        if flag in settings_dict and not isinstance(settings_dict[flag], bool):
            raise E.ConfigurationError(E.ERROR_MESSAGES["5000"] + f"{flag}={settings_dict[flag]!r}")

    return settings_dict


def save_setting(settings_dict):
    validate_settings(settings_dict)
    try:
        with open (config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError:
        return{}
