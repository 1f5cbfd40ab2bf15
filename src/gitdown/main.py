from __future__ import annotations
import logging
import sys
from gitdown.infrastructure.config import get_settings
from gitdown.interface.cli import build_parser, log_level, run

def main(argv: list[str] | None = None) -> None:
    """Parse the command line, configure logging and run gitdown."""
    settings = get_settings()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=log_level(args, settings),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    sys.exit(run(args, settings))


if __name__ == "__main__":
    main()
