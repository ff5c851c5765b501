"""
安全原语
Security Primitives - 随机源、密钥生成与 HMAC
"""
import hashlib
import hmac
import secrets
from abc import ABC, abstractmethod
from typing import Union
from ...utils.exceptions import InsufficientEntropy, InvalidConfiguration

MIN_KEY_BYTES = 32          # 256 位
DEFAULT_HASH = "sha256"
SUPPORTED_HASHES = (
    "sha256", "sha384", "sha512",
    "sha3_256", "sha3_384", "sha3_512",
    "blake2b", "blake2s",
)


class RandomSource(ABC):
    """随机源抽象基类，作为能力注入到承诺生成中"""

    @abstractmethod
    def token_bytes(self, num_bytes: int) -> bytes:
        """
        返回 num_bytes 个随机字节

        Args:
            num_bytes: 字节数

        Returns:
            bytes: 随机字节
        """
        pass

    @abstractmethod
    def randbelow(self, upper: int) -> int:
        """返回 [0, upper) 内均匀分布的整数"""
        pass


class SecureRandomSource(RandomSource):
    """基于操作系统 CSPRNG（secrets 模块）的随机源"""

    def token_bytes(self, num_bytes: int) -> bytes:
        return secrets.token_bytes(num_bytes)

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


def check_key_bytes(key_bytes: int) -> int:
    """校验密钥长度，返回合法值"""
    if isinstance(key_bytes, bool) or not isinstance(key_bytes, int) or key_bytes < MIN_KEY_BYTES:
        raise InvalidConfiguration(
            f"Key length must be an integer of at least {MIN_KEY_BYTES} bytes, got {key_bytes!r}",
            config_key="security.key_bytes")
    return key_bytes


def check_hash_name(hash_name: str) -> str:
    """校验 HMAC 哈希算法名称，返回规范化的小写名称"""
    name = str(hash_name).lower().replace("-", "_")
    if name not in SUPPORTED_HASHES:
        raise InvalidConfiguration(
            f"Unsupported hash {hash_name!r}, expected one of: {', '.join(SUPPORTED_HASHES)}",
            config_key="security.hash")
    return name


def generate_key(random_source: RandomSource, key_bytes: int = MIN_KEY_BYTES) -> bytes:
    """
    生成密钥

    Args:
        random_source: 随机源
        key_bytes: 密钥字节数（至少32）

    Returns:
        bytes: 密钥

    Raises:
        InsufficientEntropy: 随机源出错或返回字节不足
    """
    key_bytes = check_key_bytes(key_bytes)
    try:
        key = random_source.token_bytes(key_bytes)
    except (OSError, NotImplementedError) as e:
        raise InsufficientEntropy(f"Random source failed: {e}", requested=key_bytes) from e

    if not isinstance(key, (bytes, bytearray)) or len(key) != key_bytes:
        received = len(key) if isinstance(key, (bytes, bytearray)) else None
        raise InsufficientEntropy(
            f"Random source returned {received} bytes, {key_bytes} required",
            requested=key_bytes, received=received)
    return bytes(key)


def generate_hmac(key: bytes, message: Union[str, bytes], hash_name: str = DEFAULT_HASH) -> str:
    """
    计算 HMAC

    Args:
        key: 密钥
        message: 消息（字符串按 UTF-8 编码）
        hash_name: 哈希算法名称

    Returns:
        str: 小写十六进制摘要
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
    digestmod = getattr(hashlib, check_hash_name(hash_name))
    return hmac.new(key, message, digestmod).hexdigest()


def verify_hmac(expected: str, key: bytes, message: Union[str, bytes],
                hash_name: str = DEFAULT_HASH) -> bool:
    """重新计算 HMAC 并以常数时间比较"""
    computed = generate_hmac(key, message, hash_name)
    return hmac.compare_digest(str(expected).strip().lower().encode("utf-8"),
                               computed.encode("ascii"))
