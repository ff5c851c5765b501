"""
帮助表
Help Table - 以表格形式展示所有招式组合的结果
"""
from typing import List
from tabulate import tabulate
from .game_rules import RuleEngine

HEADER_CORNER = "v User / PC >"


class HelpTable:
    """帮助表类，行为玩家招式，列为电脑招式，单元格为玩家的结果"""

    def __init__(self, rule_engine: RuleEngine):
        self.rule_engine = rule_engine

    def rows(self) -> List[List[str]]:
        """生成表格数据（不含表头）"""
        moves = self.rule_engine.move_set
        return [
            [user_move] + [self.rule_engine.resolve(user_move, pc_move).value.capitalize()
                           for pc_move in moves]
            for user_move in moves
        ]

    def render(self, table_format: str = "grid") -> str:
        """
        渲染帮助表

        Args:
            table_format: tabulate 表格格式

        Returns:
            str: 渲染后的表格文本
        """
        headers = [HEADER_CORNER] + list(self.rule_engine.move_set.names)
        return tabulate(self.rows(), headers=headers, tablefmt=table_format, disable_numparse=True)
