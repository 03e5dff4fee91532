"""Async client for building and matching Wyvern bundle orders."""

from seaport.config import SeaportConfig
from seaport.port import OpenSeaPort

__version__ = "0.1.0"

__all__ = ["OpenSeaPort", "SeaportConfig", "__version__"]
