# -*- coding: utf-8 -*-
from .config import BackendConfig, Config
from .utils import get_config_path, load_config, save_config

__all__ = [
    "BackendConfig",
    "Config",
    "get_config_path",
    "load_config",
    "save_config",
]
