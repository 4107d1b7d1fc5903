"""Pong physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    left_collision_plane,
    right_collision_plane,
    paddle_zone,
    segment_index,
    segmented_bounce_velocity,
    resolve_paddle_collision,
)
from .engine import PhysicsResult, step_physics

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'left_collision_plane',
    'right_collision_plane',
    'paddle_zone',
    'segment_index',
    'segmented_bounce_velocity',
    'resolve_paddle_collision',
    'PhysicsResult',
    'step_physics',
]
