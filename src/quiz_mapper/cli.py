"""CLI for batch quiz analysis."""

import argparse

from .core import run_batch
from .errors import ConfigurationError
from .io import load_config
from .utils import setup_logging, get_logger


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Analyze completed quiz answer sets and write result reports.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "answers",
        metavar="ANSWERS",
        help="Answer file (.yaml, .json, .csv or .xlsx)",
    )
    parser.add_argument(
        "-c", "--config",
        default="configs/default.yaml",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Report output (.json or .xlsx); defaults to paths.output in the config",
    )
    parser.add_argument(
        "-n", "--expected-responses",
        type=int,
        metavar="N",
        help="Number of answers in a complete quiz (overrides the config)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Set log level to DEBUG",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        parser.error(str(e))
    setup_logging(config.get("logging") or {}, verbose=args.verbose)
    log = get_logger(__name__)

    try:
        report_path = run_batch(
            config,
            answers_path=args.answers,
            output_path=args.output,
            expected_responses=args.expected_responses,
        )
        log.info("Done. Report: %s", report_path)
    except Exception as e:
        log.exception("Analysis failed: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
