from .config_loader import HeadlessConfig, headless_config_from_env, load_headless_config

__all__ = ["HeadlessConfig", "headless_config_from_env", "load_headless_config"]
