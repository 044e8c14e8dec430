"""
numvec Configuration
====================
Defaults for element types, random builders and reductions.
Single source of truth; everything else reads through get().

Usage:
    from numvec import config
    config.get('dtype.default')             # 'float64'
    config.load_config('numvec.yaml')       # merge overrides from YAML

    with config.option_context(reductions__float_extrema=True):
        v.max()
"""

import copy
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {

    # =================================================================
    # Element types
    # =================================================================
    'dtype': {
        # zeros / ones (and their shaped variants) without an explicit dtype
        'default': 'float64',
    },

    # =================================================================
    # Random builders
    # =================================================================
    'random': {
        # low >= high and std_dev < 0 are rejected when True.
        # When False they are passed to numpy with a RuntimeWarning.
        'validate_parameters': True,
    },

    # =================================================================
    # Reductions
    # =================================================================
    'reductions': {
        # max / min are integer-only unless this is enabled
        'float_extrema': False,
    },
}

CONFIG: Dict[str, Any] = copy.deepcopy(DEFAULTS)


def get(path: str, default=None):
    """
    Get a config value by dot-notation path.

    Example:
        get('random.validate_parameters')   # Returns True
        get('dtype.missing', 'x')           # Returns 'x'
    """
    value = CONFIG
    for key in path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def set_option(path: str, value: Any) -> None:
    """Set an existing config value by dot-notation path."""
    keys = path.split('.')
    node = CONFIG
    for key in keys[:-1]:
        if not isinstance(node.get(key), dict):
            raise KeyError(f"Unknown config section: {path}")
        node = node[key]
    if keys[-1] not in node or isinstance(node[keys[-1]], dict):
        raise KeyError(f"Unknown config option: {path}")
    node[keys[-1]] = value


def _merge(target: Dict[str, Any], overrides: Dict[str, Any], prefix: str = ''):
    for key, value in overrides.items():
        path = f'{prefix}{key}'
        if isinstance(value, dict):
            if not isinstance(target.get(key), dict):
                raise KeyError(f"Unknown config section: {path}")
            _merge(target[key], value, prefix=f'{path}.')
        else:
            set_option(path, value)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Merge a YAML file over the current configuration.

    Only known options may appear in the file. Returns the merged CONFIG.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        overrides = yaml.safe_load(f) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    saved = copy.deepcopy(CONFIG)
    try:
        _merge(CONFIG, overrides)
        errors = validate_config()
        if errors:
            raise ValueError(f"Invalid config in {path}: {'; '.join(errors)}")
    except (KeyError, ValueError):
        CONFIG.clear()
        CONFIG.update(saved)
        raise

    logger.info(f"Loaded numvec config from {path}")
    return CONFIG


def reset() -> None:
    """Restore the built-in defaults."""
    CONFIG.clear()
    CONFIG.update(copy.deepcopy(DEFAULTS))


@contextmanager
def option_context(**overrides):
    """
    Temporarily override options. Dotted paths are written with '__':

        with option_context(random__validate_parameters=False):
            ...
    """
    saved = copy.deepcopy(CONFIG)
    try:
        for key, value in overrides.items():
            set_option(key.replace('__', '.'), value)
        yield CONFIG
    finally:
        CONFIG.clear()
        CONFIG.update(saved)


# =========================================================
# Config validation
# =========================================================

def validate_config() -> List[str]:
    """Check config for internal consistency."""
    from numvec import dtypes

    errors = []

    try:
        dtypes.resolve_dtype(CONFIG['dtype']['default'])
    except TypeError:
        errors.append(f"dtype.default is not a supported element type: {CONFIG['dtype']['default']!r}")

    if not isinstance(CONFIG['random']['validate_parameters'], bool):
        errors.append("random.validate_parameters must be a bool")

    if not isinstance(CONFIG['reductions']['float_extrema'], bool):
        errors.append("reductions.float_extrema must be a bool")

    return errors
