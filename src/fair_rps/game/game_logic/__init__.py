"""
游戏逻辑模块
Game Logic Module
"""
from .move_set import MoveSet, MoveRef, validate_moves
from .game_rules import RuleEngine, Outcome
from .help_table import HelpTable

__all__ = [
    'MoveSet',
    'MoveRef',
    'validate_moves',
    'RuleEngine',
    'Outcome',
    'HelpTable'
]
