from pydantic import BaseModel, ValidationError
from typing import Optional
from pathlib import Path
import logging

from document_lib.errors import ConfigError
from document_lib.storage.base import DocumentBackend
from document_lib.storage.serializer import YAMLSerializer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('config/document_lib.yml')


class DocumentConfig(BaseModel):
    log_level: str = 'WARNING'
    id_field: str = '_id'
    json_indent: Optional[int] = None


_config = DocumentConfig()


def get_config() -> DocumentConfig:
    return _config


def set_config(config: DocumentConfig) -> DocumentConfig:
    """Install `config` as the process-wide configuration and return the previous one."""
    global _config
    previous = _config
    _config = config
    return previous


def load_config(path: Optional[Path] = None) -> DocumentConfig:
    """Read a YAML configuration file into a DocumentConfig.

    A missing file yields the defaults. The result is not installed; pass
    it to `set_config` for that.
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug('No config file at %s, using defaults', cfg_path)
        return DocumentConfig()

    try:
        data = YAMLSerializer().load(cfg_path.read_bytes())
    except Exception as e:
        raise ConfigError(f"Failed to parse {cfg_path}: {e}") from e

    if data is None:
        data = {}
    elif isinstance(data, DocumentBackend):
        data = data.to_dict()
    else:
        raise ConfigError(f"Expected a mapping at the top of {cfg_path}, got {type(data).__name__}")

    try:
        config = DocumentConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {cfg_path}: {e}") from e
    logger.info('Loaded config from %s', cfg_path)
    return config
