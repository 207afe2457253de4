import argparse

from nqueens.logging_utils import parse_logging_args


def parse_solver_args(parser):
    """解析与求解相关的参数"""
    parser.add_argument(
        "--piece",
        type=str,
        default="queens",
        choices=["rooks", "queens"],
        help="Which piece to place: rooks (rows and columns) or queens (plus diagonals)."
    )
    parser.add_argument(
        "-n", "--size",
        type=int,
        default=8,
        help="Board dimension and number of pieces."
    )
    parser.add_argument(
        "--show",
        type=str,
        default="one",
        choices=["one", "all", "count"],
        help="Print a single solution, every solution, or only the count."
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max number of boards printed with --show all."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Cross-check the solution count against the relational reference solver."
    )


def parse_args(argv=None):
    """解析所有命令行参数"""
    parser = argparse.ArgumentParser(
        description="Place n non-attacking rooks or queens on an n x n board by growing smaller solutions."
    )

    parse_solver_args(parser)
    parse_logging_args(parser)

    args = parser.parse_args(argv)

    # 健全性检查
    if args.size < 1:
        parser.error("--size must be at least 1.")
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative.")

    return args
