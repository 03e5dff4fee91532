"""Marketplace API client."""

from seaport.api.client import OpenSeaAPI

__all__ = ["OpenSeaAPI"]
