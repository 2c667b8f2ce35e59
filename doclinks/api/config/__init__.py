"""Config API module."""

from .LinksConfig import LinksConfig

__all__ = ["LinksConfig"]
