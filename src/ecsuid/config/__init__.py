"""Configuration module using Pydantic Settings.

Usage:
    from ecsuid.config import UIDSettings

    settings = UIDSettings(strict_salts=True)
"""

from ecsuid.config.settings import UIDSettings

__all__ = [
    "UIDSettings",
]
