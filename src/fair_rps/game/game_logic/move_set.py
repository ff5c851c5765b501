"""
招式集合
Move Set - 有序、不可变、互不相同的招式名称
"""
from collections import Counter
from typing import Iterator, Sequence, Tuple, Union
from ...utils.exceptions import InvalidConfiguration, UnknownMove

# 招式引用：名称或 0 起始的下标
MoveRef = Union[str, int]

MIN_MOVES = 3


def validate_moves(moves: Sequence[str]) -> None:
    """
    校验招式列表

    Args:
        moves: 招式名称列表（顺序有意义）

    Raises:
        InvalidConfiguration: 列表为空、长度为偶数或小于3、含重复项或非字符串/空名称
    """
    if isinstance(moves, str):
        raise InvalidConfiguration(
            f"Moves must be a list of names, not a single string: {moves!r}.", moves=[moves])

    moves = list(moves)

    if not moves:
        raise InvalidConfiguration(
            "No moves given. Please enter an odd number (at least 3) of non-repeating moves.",
            moves=moves)

    if len(moves) < MIN_MOVES or len(moves) % 2 == 0:
        raise InvalidConfiguration(
            f"Got {len(moves)} moves. Please enter an odd number (at least 3) of non-repeating moves.",
            moves=moves)

    bad = [m for m in moves if not isinstance(m, str) or not m]
    if bad:
        raise InvalidConfiguration(f"Move names must be non-empty strings, got {bad!r}.", moves=moves)

    duplicates = [name for name, count in Counter(moves).items() if count > 1]
    if duplicates:
        raise InvalidConfiguration(
            f"All moves must be distinct, repeated: {', '.join(duplicates)}.", moves=moves)


class MoveSet:
    """招式集合类，构造时一次性建立 名称 <-> 下标 映射"""

    __slots__ = ('_names', '_index')

    def __init__(self, moves: Sequence[str]):
        """
        初始化招式集合

        Args:
            moves: 招式名称列表，按给定顺序保存

        Raises:
            InvalidConfiguration: 招式列表不合法
        """
        validate_moves(moves)
        names = tuple(moves)
        object.__setattr__(self, '_names', names)
        object.__setattr__(self, '_index', {name: i for i, name in enumerate(names)})

    def __setattr__(self, key, value):
        raise AttributeError("MoveSet is immutable")

    @property
    def names(self) -> Tuple[str, ...]:
        """按顺序返回全部招式名称"""
        return self._names

    @property
    def half(self) -> int:
        """每个招式能战胜（以及会输给）的招式数量"""
        return len(self._names) // 2

    def index_of(self, move: MoveRef) -> int:
        """
        把招式引用解析为下标

        Args:
            move: 招式名称或 0 起始下标

        Returns:
            int: 招式下标

        Raises:
            UnknownMove: 名称不存在、下标越界或类型不对（不做截断或取模）
        """
        if isinstance(move, str):
            try:
                return self._index[move]
            except KeyError:
                raise UnknownMove(f"Unknown move: {move!r}", move=move) from None
        if isinstance(move, int) and not isinstance(move, bool):
            if 0 <= move < len(self._names):
                return move
            raise UnknownMove(f"Move index {move} out of range 0..{len(self._names) - 1}", move=move)
        raise UnknownMove(f"Unsupported move reference: {move!r}", move=move)

    def name_of(self, move: MoveRef) -> str:
        """把招式引用解析为规范名称"""
        return self._names[self.index_of(move)]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self.name_of(index)

    def __contains__(self, move: object) -> bool:
        try:
            self.index_of(move)  # type: ignore[arg-type]
        except UnknownMove:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"MoveSet({list(self._names)!r})"
