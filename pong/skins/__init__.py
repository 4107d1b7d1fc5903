"""Pong skins (rendering and audio collaborators)."""

from .base import PongSkin, NullSkin
from .geometric import GeometricSkin

__all__ = ['PongSkin', 'NullSkin', 'GeometricSkin']
