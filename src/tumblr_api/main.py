"""
Command-Line Entry Point

Runs a single read-only API call and prints the decoded result as JSON:

    tumblr-api blog-info staff.tumblr.com
    tumblr-api blog-posts staff.tumblr.com --param limit=5 --param type=photo
    tumblr-api tagged gif

Credentials are read from the TUMBLR_CONSUMER_KEY, TUMBLR_CONSUMER_SECRET,
TUMBLR_OAUTH_TOKEN and TUMBLR_OAUTH_SECRET environment variables.
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import config
from .api import Credentials, TumblrClient, TumblrError


def setup_logging(log_level: str = "INFO", log_to_file: bool = False) -> logging.Logger:
    """Set up logging for the application."""
    logger = logging.getLogger("tumblr_api")
    logger.setLevel(logging.DEBUG)
    # Repeated calls replace the previous handlers
    logger.handlers.clear()
    level = getattr(logging, log_level.upper())

    # Console handler; stdout carries the JSON result
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    if log_to_file:
        config.log.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            config.log.log_file_path,
            mode='w',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.log.log_format))
        logger.addHandler(file_handler)

    return logger


def parse_params(pairs: List[str]) -> Dict[str, str]:
    """Turn ["limit=5", "type=photo"] into {"limit": "5", "type": "photo"}."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got '{pair}'")
        params[key] = value
    return params


COMMANDS = {
    "blog-info": lambda client, target, params: client.blog_info(target),
    "blog-posts": lambda client, target, params: client.blog_posts(target, params),
    "blog-likes": lambda client, target, params: client.blog_likes(target, params),
    "blog-followers": lambda client, target, params: client.blog_followers(target, params),
    "user-info": lambda client, target, params: client.user_info(),
    "dashboard": lambda client, target, params: client.user_dashboard(params),
    "tagged": lambda client, target, params: client.tagged_posts(target, params),
}

# Commands whose positional argument is required (a hostname or a tag)
TARGETED = {"blog-info", "blog-posts", "blog-likes", "blog-followers", "tagged"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tumblr-api", description="Query the Tumblr v2 API")
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument("target", nargs="?", help="Blog hostname or tag")
    parser.add_argument(
        "--param", action="append", default=[], metavar="KEY=VALUE",
        help="Extra request parameter (repeatable)"
    )
    parser.add_argument("--log-level", default=config.log.log_level)
    parser.add_argument("--log-file", action="store_true", help=f"Also log to {config.log.log_file_path}")
    return parser


def to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, perform the call and print the result. Returns an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.log_level, args.log_file)

    if args.command in TARGETED and not args.target:
        parser.error(f"{args.command} requires a blog hostname or tag")

    try:
        params = parse_params(args.param)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        client = TumblrClient.from_credentials(Credentials.from_env())
        result = COMMANDS[args.command](client, args.target, params)
    except TumblrError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


def main():
    """Main entry point for the command-line tool."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logging.getLogger("tumblr_api").info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
