"""
Pong.

Provides:
- context: SimulationContext holding one match's state
- game_state: GameState/GameEvent enums and the GameStateMachine
- physics: wall and paddle collisions, segmented paddle bounce
- scoring: point detection and win evaluation
- ai: opponent paddle tracking and speed randomizer
- loop: FrameScheduler and LoopDriver
- session: GameSession, the facade the host drives with InputEvents
- skins: render/audio collaborators
"""

__version__ = "1.0.0"
