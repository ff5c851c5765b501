"""
公平剪刀石头布主程序入口
Fair Rock Paper Scissors Main Entry
"""
import sys
import argparse
from typing import List, Optional
from .app import Application
from .game.fairness import verify_commitment
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException, InsufficientEntropy
from .utils.logger import setup_logger

logger = setup_logger("FairRPS.Main")

USAGE_EXAMPLE = "Example: fair-rps rock paper scissors"


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog='fair-rps',
        description='广义剪刀石头布，电脑招式用 HMAC 事先承诺 / '
                    'Generalized rock-paper-scissors with an HMAC-committed computer move',
        epilog=USAGE_EXAMPLE
    )
    parser.add_argument(
        'moves',
        nargs='*',
        help='奇数个（至少3个）互不相同的招式名称'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    parser.add_argument(
        '--verify',
        nargs=3,
        metavar=('HMAC', 'KEY', 'MOVE'),
        default=None,
        help='用揭示的密钥（十六进制）和招式重新计算 HMAC 并比较'
    )
    return parser


def _report_error(message: str):
    print(message, file=sys.stderr)
    print(USAGE_EXAMPLE, file=sys.stderr)


def run_verify(app: Application, digest: str, key_hex: str, move: str) -> int:
    """校验一次已揭示的承诺，匹配返回 0"""
    if verify_commitment(digest, key_hex, move, app.hash_name):
        print(f"OK: HMAC-{app.hash_name.upper()}(key, \"{move}\") matches {digest}")
        return 0
    print(f"MISMATCH: HMAC-{app.hash_name.upper()}(key, \"{move}\") does not match {digest}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)
    app = Application(args.moves, config_path=args.config)

    try:
        if args.verify:
            app.load_config()
            return run_verify(app, *args.verify)
        app.initialize()
    except (ConfigurationException, FileNotFoundError) as e:
        global_error_handler.handle(e, "初始化")
        _report_error(str(e))
        return 1

    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting...")
        logger.info("用户中断程序")
    except InsufficientEntropy as e:
        global_error_handler.handle(e, "生成承诺")
        print(f"Fatal: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
