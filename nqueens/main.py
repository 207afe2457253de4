import logging

from nqueens.config import parse_args
from nqueens.logging_utils import setup_logging
from nqueens.reference import RelationalSolver
from nqueens.solvers import (
    all_queen_solutions,
    all_rook_solutions,
    count_queen_solutions,
    count_rook_solutions,
    find_one_queen_solution,
    find_one_rook_solution,
)

logger = logging.getLogger(__name__)

PIECE_SYMBOLS = {"rooks": "♖", "queens": "♕"}

SOLVERS = {
    "rooks": (find_one_rook_solution, all_rook_solutions, count_rook_solutions),
    "queens": (find_one_queen_solution, all_queen_solutions, count_queen_solutions),
}


def visualize_solution(solution, symbol="♕"):
    """可视化一个解决方案"""
    board = []
    for row in solution:
        board.append(' '.join(symbol if square else '□' for square in row))
    return '\n'.join(board)


def main(argv=None):
    """程序入口函数"""
    args = parse_args(argv)
    setup_logging(args)

    find_one, find_all, count = SOLVERS[args.piece]
    symbol = PIECE_SYMBOLS[args.piece]
    n = args.size

    if args.show == "one":
        solution = find_one(n)
        if solution is None:
            print(f"No solution for {n} {args.piece}")
        else:
            print(visualize_solution(solution, symbol))
        solution_count = None
    elif args.show == "all":
        solutions = find_all(n)
        solution_count = len(solutions)
        print(f"找到 {solution_count} 个解决方案")
        shown = solutions if args.limit is None else solutions[:args.limit]
        for idx, solution in enumerate(shown, 1):
            print(f"\n解决方案 {idx}:")
            print(visualize_solution(solution, symbol))
            print("\n" + "=" * 20)
    else:
        solution_count = count(n)
        print(solution_count)

    if args.check:
        if solution_count is None:
            solution_count = count(n)
        expected = len(RelationalSolver(n, diagonals=args.piece == "queens").solve())
        if solution_count != expected:
            logger.error("Count mismatch for %d %s: got %d, reference %d", n, args.piece, solution_count, expected)
            return 1
        logger.info("Reference check passed for %d %s: %d", n, args.piece, expected)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
