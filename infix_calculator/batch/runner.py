"""Evaluate a batch of expressions and write the results to a file."""
from multiprocessing import Pool
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from infix_calculator.batch.worker import evaluate_line
from infix_calculator.common.config import DisplaySettings
from infix_calculator.common.logger import logger
from infix_calculator.common.operations import CalculationResult


def format_line(result: CalculationResult) -> str:
    """Render a result as one line of the results file."""
    if result.succeeded:
        return f"{result.expression} = {result.display}\n"
    return f"{result.expression} -> ERROR: {result.error}\n"


class BatchRunner(BaseModel):
    """
    Evaluates a list of expressions and writes one result line per expression.

    Features:
        - Evaluates sequentially, or spreads lines over a pool of worker processes.
        - Writes each result as soon as it is available, in input order.
        - A failed expression is reported in the output and never stops the batch.
    """

    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write computation results")
    workers: int = Field(default=1, ge=1, description="Number of worker processes")
    settings: Optional[DisplaySettings] = Field(default=None, description="Result display configuration")

    def _write(self, results: Iterable[CalculationResult], f_out: TextIO) -> List[CalculationResult]:
        written: List[CalculationResult] = []
        for result in results:
            f_out.write(format_line(result))
            f_out.flush()
            written.append(result)
        return written

    def run(self, expressions: List[str]) -> List[CalculationResult]:
        """
        Evaluate every expression and write the results file.

        :param List[str] expressions: Expressions in input order

        :return: Results in input order
        :rtype: List[CalculationResult]
        """
        logger.info(f"🚀 Evaluating {len(expressions)} expressions with {self.workers} worker(s)")
        jobs = [(line_number, expr, self.settings) for line_number, expr in enumerate(expressions, start=1)]

        with self.output_file.open("w", encoding="utf-8") as f_out:
            if self.workers == 1 or len(jobs) <= 1:
                results = self._write(map(evaluate_line, jobs), f_out)
            else:
                with Pool(processes=min(self.workers, len(jobs))) as pool:
                    # imap keeps input order while results stream in
                    results = self._write(pool.imap(evaluate_line, jobs), f_out)

        failed = sum(1 for r in results if not r.succeeded)
        logger.info(f"✉️ Results written to {self.output_file} ({failed} failed)")
        return results
