"""
测试共享夹具
Shared Test Fixtures
"""
import itertools

import pytest

from fair_rps.game.fairness import RandomSource

CLASSIC = ["rock", "paper", "scissors"]
RPSLS = ["rock", "spock", "paper", "lizard", "scissors"]


class FixedRandomSource(RandomSource):
    """确定性随机源：密钥由计数器填充，招式下标固定"""

    def __init__(self, index: int = 0, fill: int = 1):
        self.index = index
        self._fill = itertools.count(fill)

    def token_bytes(self, num_bytes: int) -> bytes:
        return bytes([next(self._fill) % 256]) * num_bytes

    def randbelow(self, upper: int) -> int:
        return self.index


class FailingRandomSource(RandomSource):
    """模拟操作系统随机源不可用"""

    def token_bytes(self, num_bytes: int) -> bytes:
        raise OSError("entropy pool unavailable")

    def randbelow(self, upper: int) -> int:
        raise OSError("entropy pool unavailable")


class ShortRandomSource(RandomSource):
    """返回字节数不足的随机源"""

    def token_bytes(self, num_bytes: int) -> bytes:
        return b"\x00" * (num_bytes - 1)

    def randbelow(self, upper: int) -> int:
        return 0


@pytest.fixture
def classic_moves():
    return list(CLASSIC)


@pytest.fixture
def rpsls_moves():
    return list(RPSLS)


@pytest.fixture
def fixed_source():
    return FixedRandomSource(index=2)
