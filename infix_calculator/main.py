"""
Command-line entrypoint.

This script either:
- evaluates the expressions given as arguments,
- evaluates every line read from stdin when no expression is given, or
- runs a batch file (text or archive) and writes a results file next to it.

Exit status is 0 when every expression evaluated, 1 when at least one failed.
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional, TextIO

from pydantic import BaseModel, Field, FilePath, ValidationError

from infix_calculator.batch.loader import load_expressions
from infix_calculator.batch.runner import BatchRunner
from infix_calculator.common.config import DisplaySettings
from infix_calculator.common.logger import configure_logging, logger
from infix_calculator.common.operations import CalculationRequest, CalculationResult
from infix_calculator.engine.calculator import calculate_request


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions to evaluate directly.
    file_path : FilePath, optional
        Path to a file or archive containing one expression per line.
    output_path : Path, optional
        Where to write batch results.
    workers : int
        Worker processes used for a batch.
    settings : DisplaySettings
        Result display configuration, carrying the --precision value.
    log_level : str, optional
        Logging level name.
    """

    expressions: List[str] = Field(default_factory=list)
    file_path: Optional[FilePath] = None
    output_path: Optional[Path] = None
    workers: int = Field(default=1, ge=1)
    settings: DisplaySettings = Field(default_factory=DisplaySettings)
    log_level: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infix-calc",
        description="Evaluate infix arithmetic expressions (+ - * / ^ %, parentheses)",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions to evaluate")
    parser.add_argument("-f", "--file", dest="file_path", help="File or archive with one expression per line")
    parser.add_argument("-o", "--output", dest="output_path", help="Results file for --file")
    parser.add_argument("-w", "--workers", type=int, default=1, help="Worker processes for --file")
    parser.add_argument(
        "-p", "--precision", type=int, default=DisplaySettings().precision, help="Fractional digits in results"
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments, ``sys.argv[1:]`` when omitted

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file_path and args.expressions:
        parser.error("expressions and --file cannot be combined")

    values = {k: v for k, v in vars(args).items() if v is not None}
    values["settings"] = {"precision": values.pop("precision")}
    try:
        return CliArgs(**values)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    stem = input_path.name
    for suffix in input_path.suffixes:
        stem = stem[: -len(suffix)]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def run_batch(cli_args: CliArgs, settings: DisplaySettings) -> int:
    output_path: Path = cli_args.output_path or build_output_path(cli_args.file_path)
    try:
        expressions = load_expressions(cli_args.file_path)
    except ValueError as exc:
        logger.error(f"📄❌ {exc}")
        print(exc, file=sys.stderr)
        return 1

    runner = BatchRunner(output_file=output_path, workers=cli_args.workers, settings=settings)
    results = runner.run(expressions)
    print(f"{len(results)} expressions evaluated, results written to {output_path}")
    return 0 if all(r.succeeded for r in results) else 1


def run_expressions(expressions: List[str], settings: DisplaySettings, out: TextIO) -> int:
    status = 0
    for expression in expressions:
        result: CalculationResult = calculate_request(CalculationRequest(expression=expression), settings)
        print(result.display, file=out)
        if not result.succeeded:
            status = 1
    return status


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function, installed as the ``infix-calc`` console script.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)
    settings = cli_args.settings

    if cli_args.file_path is not None:
        return run_batch(cli_args, settings)

    expressions = cli_args.expressions
    if not expressions:
        # Blank stdin lines are skipped, unlike blank arguments which evaluate to 0
        expressions = [line.strip() for line in sys.stdin if line.strip()]
    return run_expressions(expressions, settings, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
