"""
Manifest analyzer - classifies each input and dispatches it to its parser
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Sequence, TypeVar
import logging
import time

from .classifier import classify
from .errors import ManifestError
from .models import ManifestInput, NormalizedResult, ParseFailure, ParseOutcome
from .parsers import get_parser

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ManifestAnalyzer:
    """Turns a batch of manifests into normalized name -> value results.

    analyze() is strict: the first input that fails to classify or parse
    aborts the batch by raising its ManifestError. analyze_outcomes() is the
    lenient variant and returns a ParseFailure in that input's position.

    With max_workers > 1 inputs are parsed on a thread pool. Results are
    always gathered in input order, so the failure reported by analyze() is
    the one at the lowest index, exactly as in sequential mode.
    """

    def __init__(self, max_workers: int = 1):
        self.max_workers = max(1, max_workers)

    def analyze_one(self, manifest: ManifestInput) -> NormalizedResult:
        """
        Classify and parse a single manifest.

        Raises:
            ManifestError: Classification or parse failure, tagged with the
                manifest name
        """
        try:
            kind = classify(manifest.name)
            parser = get_parser(kind)
            logger.debug(f"Parsing {manifest.name} with {parser.name}")
            result = parser.parse(manifest.content)
        except ManifestError as e:
            e.with_source(manifest.name)
            raise

        result.source = manifest.name
        return result

    def analyze(self, inputs: Sequence[ManifestInput]) -> List[NormalizedResult]:
        """Analyze a batch, stopping at the first failure"""
        start_time = time.time()
        results = self._run(self.analyze_one, inputs)
        logger.info(
            f"Analyzed {len(results)} manifests in {time.time() - start_time:.3f}s"
        )
        return results

    def analyze_outcomes(self, inputs: Sequence[ManifestInput]) -> List[ParseOutcome]:
        """Analyze a batch, recording a ParseFailure for each failing input"""
        outcomes = self._run(self._outcome, inputs)
        failures = sum(1 for outcome in outcomes if not isinstance(outcome, NormalizedResult))
        logger.info(f"Analyzed {len(outcomes)} manifests, {failures} failed")
        return outcomes

    def _outcome(self, manifest: ManifestInput) -> ParseOutcome:
        try:
            kind = classify(manifest.name)
        except ManifestError as e:
            logger.warning(f"Failed to analyze {manifest.name}: {e.message}")
            return e.to_failure()

        outcome = get_parser(kind).parse_outcome(manifest.content, source=manifest.name)
        if isinstance(outcome, ParseFailure):
            logger.warning(f"Failed to analyze {manifest.name}: {outcome.message}")
        return outcome

    def _run(self, func: Callable[[ManifestInput], T],
             inputs: Sequence[ManifestInput]) -> List[T]:
        if self.max_workers > 1 and len(inputs) > 1:
            return self._run_parallel(func, inputs)
        return self._run_sequential(func, inputs)

    def _run_sequential(self, func: Callable[[ManifestInput], T],
                        inputs: Sequence[ManifestInput]) -> List[T]:
        """Process inputs one after another"""
        return [func(manifest) for manifest in inputs]

    def _run_parallel(self, func: Callable[[ManifestInput], T],
                      inputs: Sequence[ManifestInput]) -> List[T]:
        """Process inputs on a thread pool, collecting in input order"""
        results: List[T] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: List[Future] = [executor.submit(func, manifest) for manifest in inputs]
            try:
                for future in futures:
                    results.append(future.result())
            except ManifestError:
                for future in futures:
                    future.cancel()
                raise
        return results


def create_analyzer(max_workers: int = 1) -> ManifestAnalyzer:
    """Factory function to create a manifest analyzer

    Args:
        max_workers: Number of threads used to parse a batch (1 = sequential)

    Returns:
        Configured ManifestAnalyzer instance
    """
    return ManifestAnalyzer(max_workers=max_workers)
