"""
公平剪刀石头布
Fair Rock Paper Scissors
"""
from .game import (
    GameController, RoundResult, MoveSet, RuleEngine, Outcome, HelpTable,
    Commitment, FairnessCommitment, verify_commitment
)

__version__ = "0.1.0"

__all__ = [
    'GameController',
    'RoundResult',
    'MoveSet',
    'RuleEngine',
    'Outcome',
    'HelpTable',
    'Commitment',
    'FairnessCommitment',
    'verify_commitment'
]
