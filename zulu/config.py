import os
import json
from typing import Dict

CONFIG_FILE = os.path.join(os.path.dirname(__file__), 'config.json')

DEFAULTS = {
    'testing_mode': False,
}

def load_config(config_file: str = CONFIG_FILE) -> Dict:
    """Load config.json next to the package, falling back to defaults"""
    config = dict(DEFAULTS)
    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError):
        return config
    if isinstance(data, dict):
        config.update({key: data[key] for key in DEFAULTS if key in data})
    return config

def get_testing_mode(config_file: str = CONFIG_FILE) -> bool:
    """Check if testing mode is enabled"""
    return bool(load_config(config_file)['testing_mode'])
