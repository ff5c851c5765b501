"""
公平性模块
Fairness Module
"""
from .security import (
    RandomSource, SecureRandomSource, generate_key, generate_hmac, verify_hmac,
    MIN_KEY_BYTES, DEFAULT_HASH, SUPPORTED_HASHES
)
from .commitment import Commitment, FairnessCommitment, verify_commitment

__all__ = [
    'RandomSource',
    'SecureRandomSource',
    'generate_key',
    'generate_hmac',
    'verify_hmac',
    'MIN_KEY_BYTES',
    'DEFAULT_HASH',
    'SUPPORTED_HASHES',
    'Commitment',
    'FairnessCommitment',
    'verify_commitment'
]
