"""Configuration for running TinyLink from a checkout (``python app.py``)."""

from tinylink.config import Config, load_config

__all__ = ["Config", "load_config"]
