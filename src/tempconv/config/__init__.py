"""Configuration loading"""

from tempconv.config.settings import TempconvConfig, load_config

__all__ = ["TempconvConfig", "load_config"]
