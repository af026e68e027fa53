"""
Common entry point for every script: parse arguments, configure logging,
connect to the network, run, and exit 0 on success or 1 on any failure.
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from . import config
from .chain import Chain

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging():
    handlers = [logging.StreamHandler()]
    log_file = os.getenv("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser(main: Callable, add_arguments: Optional[Callable] = None,
                 prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=(main.__doc__ or "").strip() or None)
    parser.add_argument(
        "--network",
        default=os.getenv("NETWORK", config.DEFAULT_NETWORK),
        help="network to run against (default: $NETWORK or localhost)",
    )
    if add_arguments is not None:
        add_arguments(parser)
    return parser


def run_script(main: Callable, add_arguments: Optional[Callable] = None,
               argv: Optional[Sequence[str]] = None, prog: Optional[str] = None,
               connect: Callable = Chain.connect):
    """Run `main(chain, **options)` and exit the process with its outcome."""
    args = build_parser(main, add_arguments, prog).parse_args(argv)
    setup_logging()

    options = vars(args)
    network = options.pop("network")
    try:
        chain = connect(network)
        result = main(chain, **options)
    except KeyboardInterrupt:
        logger.error("Interrupted")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Script failed: {e}")
        sys.exit(1)

    if result is not None:
        print(f" {result}")
    sys.exit(0)
