"""Test class BatchRunner."""
from pathlib import Path

from pydantic import ValidationError
import pytest

from infix_calculator.batch.runner import BatchRunner, format_line
from infix_calculator.common.operations import CalculationResult


@pytest.fixture
def tmp_output_file(tmp_path: Path) -> Path:
    """Create a temporary output file path."""
    return tmp_path / "results.txt"


def test_format_line() -> None:
    """Results and errors have distinct line formats."""
    ok = CalculationResult(expression="2 + 3", result=5.0, display="5")
    failed = CalculationResult(expression="2 +", display="Error: Invalid expression", error="Invalid expression")
    assert format_line(ok) == "2 + 3 = 5\n"
    assert format_line(failed) == "2 + -> ERROR: Invalid expression\n"


@pytest.mark.parametrize("workers", [1, 2])
def test_run_writes_results_in_order(tmp_output_file: Path, workers: int) -> None:
    """Every expression gets a line, in input order, whatever the worker count."""
    expressions = ["2 + 3", "4 * 5", "5 / 0", "2^3^2", "(1"]
    runner = BatchRunner(output_file=tmp_output_file, workers=workers)
    results = runner.run(expressions)

    assert [r.expression for r in results] == expressions
    assert tmp_output_file.read_text().splitlines() == [
        "2 + 3 = 5",
        "4 * 5 = 20",
        "5 / 0 -> ERROR: Division by zero",
        "2^3^2 = 512",
        "(1 -> ERROR: Mismatched parentheses",
    ]


def test_run_empty_batch(tmp_output_file: Path) -> None:
    """An empty batch writes an empty file."""
    assert BatchRunner(output_file=tmp_output_file).run([]) == []
    assert tmp_output_file.read_text() == ""


def test_runner_rejects_invalid_workers(tmp_output_file: Path) -> None:
    """At least one worker is required."""
    with pytest.raises(ValidationError):
        BatchRunner(output_file=tmp_output_file, workers=0)
