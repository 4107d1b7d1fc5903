"""Exceptions raised by the Pong simulation core."""


class PongError(Exception):
    """Base class for all Pong errors."""


class PhysicsInvariantError(PongError):
    """A simulation value became non-finite.

    The loop driver stops ticking and reports the fault to the host.
    """
