from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from document_lib.config.config import load_config
from document_lib.errors import ConfigError


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for applications built on document_lib.

    An early NOTSET basic config is installed so the config file can be
    read, then the root logger is reconfigured to `DocumentConfig.log_level`
    as loaded by `load_config` (WARNING when the file is invalid or names
    an unknown level). Returns a module logger for the caller.
    """
    logging.basicConfig(level=logging.NOTSET, format='%(asctime)s INFO %(message)s')
    level = logging.WARNING

    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logging.getLogger(__name__).warning('Ignoring config for logging: %s', e)
    else:
        _lvl = getattr(logging, cfg.log_level.upper(), None)
        if isinstance(_lvl, int):
            level = _lvl

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.info('Log level set to: %s', logging.getLevelName(level))
    return logger
