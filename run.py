import json
import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from typing import Optional

from decimal_matcher.app.queries import MatchDecimalQuery, MatchDecimalQueryHandler
from decimal_matcher.domain.services.factory import DecimalNumberMatcherFactory
from decimal_matcher.shared.config import get_settings
from decimal_matcher.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Decimal Number Matcher Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    check_parser = subparsers.add_parser(
        "check",
        aliases=["match"],
        help="Validate a single value and print the result as JSON.",
    )
    check_parser.add_argument("value", nargs="?", default=None, help="Value to validate")
    check_parser.add_argument(
        "--null",
        action="store_true",
        help="Validate an absent value instead of VALUE",
    )
    check_parser.add_argument(
        "--max-digits",
        type=int,
        default=None,
        help="Maximum number of digits (default: DEFAULT_MAX_DIGITS)",
    )
    check_parser.add_argument(
        "--max-decimal-places",
        type=int,
        default=None,
        help="Maximum number of decimal places (default: DEFAULT_MAX_DECIMAL_PLACES)",
    )
    check_parser.set_defaults(func=run_check)

    return parser


def run_check(args: Namespace) -> int:
    if args.null and args.value is not None:
        raise ValueError("VALUE and --null are mutually exclusive")

    if not args.null and args.value is None:
        raise ValueError("VALUE is required unless --null is given")

    handler = MatchDecimalQueryHandler(
        DecimalNumberMatcherFactory.from_settings(get_settings())
    )

    outcome = handler.handle(
        MatchDecimalQuery(
            value=None if args.null else args.value,
            max_digits=args.max_digits,
            max_decimal_places=args.max_decimal_places,
        )
    )

    print(json.dumps(outcome.to_dict()))

    return 0 if outcome.is_valid else 1


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()

    configure_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS
    )

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.info("command_starting", command=args.command)

    try:
        exit_code = args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        sys.exit(2)

    logger.info("command_completed", command=args.command, exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
