"""
承诺状态机模块
Commitment State Machine Module
"""
from .commitment_state import CommitmentState
from .commitment_state_machine import CommitmentStateMachine

__all__ = ['CommitmentState', 'CommitmentStateMachine']
