import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


def parse_logging_args(parser):
    """解析与日志相关的参数"""
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the solver output."
    )
    parser.add_argument(
        "--log_file",
        type=str,
        default=None,
        help="Also append log records to this file (UTF-8)."
    )


def setup_logging(args):
    """
    配置日志记录，包括终端输出和可选的文件日志。

    参数:
        args: 命令行参数，包含 log_level 和 log_file
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=getattr(logging, args.log_level),
        force=True,
    )
    if args.log_file:
        log_file_handler = logging.FileHandler(args.log_file, mode="a", encoding="utf-8")
        log_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logging.getLogger().addHandler(log_file_handler)
