"""Input handling: normalized events, keyboard source and resize throttle."""

from .input_event import InputCommand, InputEvent
from .throttle import ResizeThrottle

__all__ = ['InputCommand', 'InputEvent', 'ResizeThrottle']
