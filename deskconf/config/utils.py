# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import CONFIG_FILE, WORKING_DIR
from .config import Config

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    return WORKING_DIR / CONFIG_FILE


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load config.json; missing or invalid files fall back to defaults."""
    if config_path is None:
        config_path = get_config_path()
    config = Config()
    if config_path.is_file():
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                config = Config.model_validate(json.load(fh))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring invalid %s: %s", config_path, exc)
    return config


def save_config(config: Config, config_path: Optional[Path] = None) -> None:
    if config_path is None:
        config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as fh:
        json.dump(
            config.model_dump(mode="json"),
            fh,
            indent=2,
            ensure_ascii=False,
        )
