import logging
from pathlib import Path
import yaml

module_logger = logging.getLogger('libleader.config')

DEFAULTS = {
    'prefix': '!',
    'host': 'localhost',
    'port': 4242,
    'protocol': 'http',
    'token': None,
    'gateway': None,
    'commands': None,
    'poll_interval': 0.1,
    'max_poll_interval': 20,
    'wiki': None,
    'log_level': 'INFO',
}

REQUIRED = ('username',)


def parse_config(data: dict) -> dict:
    """
    fills in defaults and drops unknown keys
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"config must be a mapping, got {type(data).__name__}")

    config = dict(DEFAULTS)
    for key, value in data.items():
        if key in DEFAULTS or key in REQUIRED:
            config[key] = value
        else:
            module_logger.warning(f"ignoring unknown config key '{key}'")

    for key in REQUIRED:
        if not config.get(key):
            raise ValueError(f"config key '{key}' is required")

    if config['commands'] is not None and not isinstance(config['commands'], list):
        raise ValueError("config key 'commands' must be a list of module names")
    if config['wiki'] is not None and not isinstance(config['wiki'], dict):
        raise ValueError("config key 'wiki' must be a mapping")
    config['log_level'] = str(config['log_level']).upper()
    return config


def load_config(path='config.yaml') -> dict:
    p = Path(path)
    module_logger.debug(f"loading config from {p}")
    with open(p) as f:
        return parse_config(yaml.safe_load(f))
