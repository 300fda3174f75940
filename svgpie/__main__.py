import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from svgpie import (
    PieChartError,
    ValidationError,
    chart_from_program,
    check_consistency,
    create_pie_chart,
    parse_program,
    validate,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render a pie chart script as SVG")
    parser.add_argument("path", help="Path to the chart script")
    parser.add_argument(
        "-o",
        "--output",
        help="Write the SVG document to this path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path, encoding="utf-8") as fin:
        text = fin.read()

    logger.info("Parsing chart from %s", args.path)
    try:
        program = parse_program(text)
        validate(program)
        slices, options = chart_from_program(program)
    except (SyntaxError, ValidationError) as exc:
        logger.error("Invalid chart script: %s", exc)
        raise SystemExit(1)
    logger.info("Validation succeeded: %d slice(s)", len(slices))

    for warning in check_consistency(slices):
        logger.warning("Consistency warning (%s): %s", warning.kind, warning)

    try:
        document = create_pie_chart(slices, options)
    except (PieChartError, ValidationError) as exc:
        logger.error("Failed to build pie chart: %s", exc)
        raise SystemExit(1)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(document, encoding="utf-8")
        print(f"SVG document written to {output_path}")
    else:
        sys.stdout.write(document)


if __name__ == "__main__":
    main(sys.argv[1:])
