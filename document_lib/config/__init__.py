from .config import DocumentConfig, get_config, set_config, load_config

__all__ = ["DocumentConfig", "get_config", "set_config", "load_config"]
