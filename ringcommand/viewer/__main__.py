"""
Command-line entry point for the ring command demo.

Usage:
    python -m ringcommand.viewer --items 6
    python -m ringcommand.viewer ring.json --debug
"""

import argparse
import logging

from ringcommand import log
from ringcommand.config import RingConfig


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Show a gesture ring driven by the keyboard"
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="JSON file with ring config",
    )
    parser.add_argument(
        "--items", "-n",
        type=int,
        default=6,
        help="Icon count when no config file is given (default: 6)",
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Log state transitions",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    log.set_level(log.Level.DEBUG if args.debug else log.Level.INFO)

    if args.config:
        config = RingConfig.from_file(args.config)
    else:
        config = RingConfig(item_count=args.items)

    from ringcommand.viewer.glfw_host import RingViewer

    RingViewer(config).run()


if __name__ == "__main__":
    main()
