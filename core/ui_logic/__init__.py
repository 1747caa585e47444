"""
UI logic package - portable across platforms.

Board dimensions, the turn state machine
and the interfaces it drives. No UI framework dependencies.
"""
from .board_layout import BoardLayout, BoardDimensions
from .game_controller import GameController, GameMessages, ContractViolation
from .scheduler import Scheduler, ScheduledTask
from .view_backend import UIBackend

__all__ = [
    'BoardLayout',
    'BoardDimensions',
    'GameController',
    'GameMessages',
    'ContractViolation',
    'Scheduler',
    'ScheduledTask',
    'UIBackend'
]
