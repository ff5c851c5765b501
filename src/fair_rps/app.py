"""
应用程序主类
Application Main Class - 交互式菜单
"""
from typing import Callable, Optional, Sequence, Union
from tabulate import tabulate_formats
from .game import GameController, HelpTable, MoveSet, RuleEngine, Outcome, RoundResult
from .game.fairness import RandomSource, MIN_KEY_BYTES, DEFAULT_HASH
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException, UnknownMove
from .utils.logger import setup_logger, setup_logger_from_config

logger = setup_logger("FairRPS.App")

RESULT_TEXT = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.DRAW: "Draw!"
}


class Application:
    """应用程序主类"""

    def __init__(self,
                 moves: Sequence[str],
                 config_path: Optional[str] = None,
                 random_source: Optional[RandomSource] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        初始化应用程序

        Args:
            moves: 命令行给出的招式名称
            config_path: 配置文件路径，None 时使用 config/config.yaml（不存在则用默认值）
            random_source: 随机源（可选）
            input_func: 读取玩家输入的函数（默认 input）
            output_func: 输出文本的函数（默认 print）
        """
        self.moves = list(moves)
        self.config_path = config_path
        self.random_source = random_source
        self.input_func = input_func or input
        self.output_func = output_func or print

        self.config: dict = {}
        self.key_bytes = MIN_KEY_BYTES
        self.hash_name = DEFAULT_HASH
        self.table_format = "grid"

        # 游戏组件
        self.rule_engine: Optional[RuleEngine] = None
        self.game_controller: Optional[GameController] = None
        self.help_table: Optional[HelpTable] = None

    def load_config(self):
        """
        加载配置并设置日志

        Raises:
            FileNotFoundError: 显式指定的配置文件不存在
            ConfigurationException: 配置内容不合法
        """
        self.config = ConfigLoader.load_config(self.config_path)
        setup_logger_from_config(ConfigLoader.get_logging_config(self.config))

        security_config = ConfigLoader.get_security_config(self.config)
        self.key_bytes = security_config.get('key_bytes', MIN_KEY_BYTES)
        self.hash_name = security_config.get('hash', DEFAULT_HASH)

        display_config = ConfigLoader.get_display_config(self.config)
        table_format = display_config.get('table_format', 'grid')
        if table_format not in tabulate_formats:
            raise ConfigurationException(
                f"Unknown table format {table_format!r}, expected one of: {', '.join(tabulate_formats)}",
                config_key="display.table_format")
        self.table_format = table_format

    def initialize(self):
        """
        初始化所有组件

        Raises:
            InvalidConfiguration: 招式列表或安全参数不合法
            ConfigurationException: 配置文件不合法
            FileNotFoundError: 配置文件不存在
        """
        self.load_config()

        # 先校验招式，任何游戏状态都在校验通过后才创建
        move_set = MoveSet(self.moves)
        self.rule_engine = RuleEngine(move_set)
        self.game_controller = GameController(
            rule_engine=self.rule_engine,
            key_bytes=self.key_bytes,
            hash_name=self.hash_name,
            random_source=self.random_source
        )
        self.game_controller.on_round_result = self._on_round_result
        self.help_table = HelpTable(self.rule_engine)

        logger.info(f"应用程序初始化成功，招式: {', '.join(move_set)}")

    def show_menu(self):
        """显示菜单"""
        self.output_func("Available moves:")
        for number, move in enumerate(self.rule_engine.move_set, start=1):
            self.output_func(f"{number} - {move}")
        self.output_func("0 - exit")
        self.output_func("? - help")

    def parse_choice(self, choice: str) -> Optional[Union[int, str]]:
        """
        解析玩家输入

        Args:
            choice: 去掉首尾空白的输入，菜单编号（1..N）或招式名称

        Returns:
            招式下标或名称；无法识别返回 None
        """
        move_set = self.rule_engine.move_set
        if choice.isdecimal():
            number = int(choice)
            if 1 <= number <= len(move_set):
                return number - 1
            return None
        if choice in move_set:
            return choice
        return None

    def show_result(self, result: RoundResult):
        """显示回合结果和密钥"""
        self.output_func(f"Your move: {result.player_move}")
        self.output_func(f"Computer move: {result.computer_move}")
        self.output_func(RESULT_TEXT[result.outcome])
        self.output_func(f"HMAC key: {result.key_hex}")
        if result.verified:
            self.output_func(f"Verified: HMAC-{self.hash_name.upper()}(key, "
                             f"\"{result.computer_move}\") == {result.digest}")
        else:
            self.output_func("WARNING: HMAC verification failed!")

    def run(self):
        """
        运行交互主循环，输入 0 时返回

        Raises:
            InsufficientEntropy: 随机源出错
            EOFError / KeyboardInterrupt: 输入结束或被中断
        """
        if self.game_controller is None:
            self.initialize()

        self.output_func(f"HMAC: {self.game_controller.start_round()}")

        while True:
            self.show_menu()
            choice = self.input_func("Enter your move: ").strip()

            if choice == "0":
                self.output_func("Exiting...")
                return

            if choice == "?":
                self.output_func(self.help_table.render(self.table_format))
                continue

            move = self.parse_choice(choice)
            if move is None:
                self.output_func("Invalid input. Please try again.")
                continue

            try:
                result = self.game_controller.play(move)
            except UnknownMove as e:
                global_error_handler.handle(e, "玩家出招")
                self.output_func("Invalid input. Please try again.")
                continue

            self.show_result(result)
            self.output_func(f"\nHMAC: {self.game_controller.start_round()}")

    def _on_round_result(self, round_result: RoundResult):
        """回合结果回调"""
        logger.debug(f"回合结果: {round_result.to_dict()}")
