import sys
import logging
import argparse
import warnings

from topspin.base import get_root_logging, error_logger
from topspin.config import Config
from topspin.errors import TopSpinError, NoResultsWarning
from topspin.orbit import explore_cycle
from topspin.search import find_best_random_combinations

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="topspin", description="TopSpin 置换循环分析")
    ap.add_argument("--config", default=None, help="YAML 配置文件路径，覆盖默认参数")
    ap.add_argument("--log-level", default=None, help="日志级别，默认 Config.LOG_LEVEL")
    ap.add_argument("--log-file", default=None, help="日志文件，默认 Config.LOG_FILE，传空字符串则只输出到控制台")
    sub = ap.add_subparsers(dest="command", required=True)

    ep = sub.add_parser("explore", help="重复执行一个操作序列直到回到起始状态")
    ep.add_argument("--n", type=int, default=None, help="状态长度，起始状态为 1..n")
    ep.add_argument("--k", type=int, default=None, help="reverse_prefix 的 k")
    ep.add_argument("--sequence", nargs="+", required=True, help="操作序列，如 1 3 2 或 L X R")
    ep.add_argument("--head", type=int, default=10, help="打印状态表的前几行，0 表示不打印")
    ep.add_argument("--verbose", action="store_true")

    sp = sub.add_parser("search", help="随机搜索循环最长的操作序列")
    sp.add_argument("--moves", nargs="+", default=None, help="允许的操作码")
    sp.add_argument("--length", type=int, default=None, help="每个序列的长度")
    sp.add_argument("--samples", type=int, default=None, help="成功评估的不重复序列数")
    sp.add_argument("--top", type=int, default=None, help="返回前几名")
    sp.add_argument("--n", type=int, default=None)
    sp.add_argument("--k", type=int, default=None)
    sp.add_argument("--seed", type=int, default=None)
    return ap


def _default(value, default):
    """命令行未给出时取 Config 默认值，显式的 0 保留并交由校验报错"""
    return default if value is None else value


@error_logger(expected=(TopSpinError,))
def cmd_explore(args) -> int:
    n = _default(args.n, Config.DEFAULT_N)
    k = _default(args.k, Config.DEFAULT_K)
    record = explore_cycle(range(1, n + 1), args.sequence, k, verbose=args.verbose, max_moves=Config.MAX_MOVES)
    print(record.cycle_info)
    if args.head:
        print(record.to_frame().head(args.head).to_string(index=False))
    return 0


@error_logger(expected=(TopSpinError,))
def cmd_search(args) -> int:
    n = _default(args.n, Config.DEFAULT_N)
    seed = _default(args.seed, Config.SEED)
    with warnings.catch_warnings():
        # 空结果由返回值表达，命令行下不重复提示
        warnings.simplefilter("ignore", NoResultsWarning)
        result = find_best_random_combinations(
            moves=args.moves or Config.DEFAULT_MOVES,
            combo_length=_default(args.length, Config.COMBO_LENGTH),
            n_samples=_default(args.samples, Config.N_SAMPLES),
            n_top=_default(args.top, Config.N_TOP),
            start_state=range(1, n + 1),
            k=_default(args.k, Config.DEFAULT_K),
            seed=seed,
        )
    if result.empty:
        print("No successful results found.")
        return 1
    print(result.to_string(index=False))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.config:
        Config.load(args.config)
    log_file = Config.LOG_FILE if args.log_file is None else args.log_file
    get_root_logging(log_file, level=(args.log_level or Config.LOG_LEVEL).upper())

    logger.debug(f"command: {args.command}, args: {vars(args)}")
    commands = {"explore": cmd_explore, "search": cmd_search}
    try:
        return commands[args.command](args)
    except TopSpinError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
