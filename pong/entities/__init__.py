"""Pong game entities."""

from .ball import Ball
from .paddle import Paddle, PaddleDirection

__all__ = [
    'Ball',
    'Paddle', 'PaddleDirection',
]
