import json
import copy

CONFIG_PATH = "config.json"

DEFAULT_CONFIG = {
    "debug_mode": False,
    "game_window_title": "Umamusume",
    "capture_region": None,
    "ocr_languages": "eng+jpn",
    "ocr_width": 1080,
    "tesseract_cmd": "",
    "default_distance": "middle",
    "default_strategy": "front-runner",
    "overlay": {
        "enabled": True,
        "x": 20,
        "y": 100
    },
    "adb_config": {
        "adb_path": "adb",
        "device_address": ""
    }
}

def load_config(config_path=CONFIG_PATH):
    """
    Load config.json merged over the built-in defaults.

    Nested sections (overlay, adb_config) are merged key by key so a partial
    section in the user's file keeps the remaining defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
    except FileNotFoundError:
        print(f"[INFO] {config_path} not found, using default settings. Run 'python setup_config.py' to create one.")
        return config
    except Exception as e:
        print(f"[ERROR] Error loading {config_path}: {e}")
        return config

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value
    return config

config = load_config()
DEBUG_MODE = config.get("debug_mode", False)

def debug_print(message):
    """Print debug message only if DEBUG_MODE is enabled"""
    if DEBUG_MODE:
        print(message)
