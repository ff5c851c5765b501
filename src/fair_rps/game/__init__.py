"""
游戏模块
Game Module
"""
from .game_controller import GameController, RoundResult
from .game_logic import MoveSet, RuleEngine, Outcome, HelpTable, validate_moves
from .fairness import Commitment, FairnessCommitment, SecureRandomSource, verify_commitment
from .state_machine import CommitmentState, CommitmentStateMachine

__all__ = [
    'GameController',
    'RoundResult',
    'MoveSet',
    'RuleEngine',
    'Outcome',
    'HelpTable',
    'validate_moves',
    'Commitment',
    'FairnessCommitment',
    'SecureRandomSource',
    'verify_commitment',
    'CommitmentState',
    'CommitmentStateMachine'
]
