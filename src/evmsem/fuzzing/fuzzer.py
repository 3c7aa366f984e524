"""
Differential fuzzer - compares candidate implementations against the
reference semantics.

Generates random operation applications and compares results from:
- Dynamically discovered implementations/v*.py candidates
- The reference functions in evmsem.opcodes.OPERATIONS

Candidates are auto-discovered by evmsem.registry. Each must expose a
callable for every operation name.
"""

import argparse
import logging
import random
from dataclasses import dataclass, field
from types import ModuleType
from typing import Callable, Iterable, List, Optional, Sequence

from evmsem.opcodes import OPERATIONS
from evmsem.registry import get_available_versions, get_implementation
from evmsem.words import UINT256_MAX, WORD_BITS, WORD_BYTES
from .case import Case, Outcome, run_candidate, run_reference
from .enumeration import BOUNDARY_WORDS

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Constants
# =============================================================================

# Mixed strategy probabilities (equal weight)
PROB_RANDOM_STRATEGY = 0.25
PROB_BOUNDARY_STRATEGY = 0.25
PROB_NEAR_BOUNDARY_STRATEGY = 0.25
PROB_SMALL_STRATEGY = 0.25


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for case generators."""
    max_address: int = 256            # Largest mstore address
    max_memory_words: int = 4         # Largest initial memory, in words
    max_delta: int = 3                # Near-boundary offset
    max_small: int = 300              # Upper bound for the small-word strategy


DEFAULT_CONFIG = GeneratorConfig()


# =============================================================================
# Word Generators
# =============================================================================

WordGenerator = Callable[[random.Random, GeneratorConfig], int]


def random_word(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> int:
    """Uniformly random 256-bit word."""
    return rng.getrandbits(WORD_BITS)


def boundary_word(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> int:
    return rng.choice(BOUNDARY_WORDS)


def near_boundary_word(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> int:
    """A boundary word nudged by a few units, wrapping at 2**256."""
    delta = rng.randint(-config.max_delta, config.max_delta)
    return (rng.choice(BOUNDARY_WORDS) + delta) & UINT256_MAX


def small_word(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> int:
    return rng.randint(0, config.max_small)


# =============================================================================
# Case Generators
# =============================================================================

def generate_case(rng: random.Random, word: WordGenerator,
                  config: GeneratorConfig = DEFAULT_CONFIG) -> Case:
    """Pick an operation uniformly and draw its operands with ``word``."""
    name = rng.choice(list(OPERATIONS))
    op = OPERATIONS[name]
    if op.uses_memory:
        address = rng.randint(0, config.max_address)
        size = rng.randint(0, config.max_memory_words) * WORD_BYTES
        memory = bytes(rng.getrandbits(8) for _ in range(size))
        return Case(name, (address, word(rng, config)), memory)
    return Case(name, tuple(word(rng, config) for _ in range(op.arity)))


def generate_random_case(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> Case:
    return generate_case(rng, random_word, config)


def generate_boundary_case(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> Case:
    return generate_case(rng, boundary_word, config)


def generate_mixed_strategy_case(rng: random.Random, config: GeneratorConfig = DEFAULT_CONFIG) -> Case:
    """
    Generate a case using a mixed strategy, randomly selecting the word source:
    1. Uniformly random words
    2. Boundary words
    3. Boundary words offset by a few units
    4. Small words

    Random words almost never hit the signed minimum or a zero divisor,
    so the other strategies carry the edge cases.
    """
    strategy_roll = rng.random()

    if strategy_roll < PROB_RANDOM_STRATEGY:
        word = random_word
    elif strategy_roll < PROB_RANDOM_STRATEGY + PROB_BOUNDARY_STRATEGY:
        word = boundary_word
    elif strategy_roll < PROB_RANDOM_STRATEGY + PROB_BOUNDARY_STRATEGY + PROB_NEAR_BOUNDARY_STRATEGY:
        word = near_boundary_word
    else:
        word = small_word
    return generate_case(rng, word, config)


# Generator registry for dispatch
GENERATORS: dict[str, Callable[[random.Random, GeneratorConfig], Case]] = {
    "random": generate_random_case,
    "boundary": generate_boundary_case,
    "mixed": generate_mixed_strategy_case,
}


# =============================================================================
# Execution Results
# =============================================================================

@dataclass(frozen=True)
class ExecutionResult:
    """Base class for execution results - used as a union type."""


@dataclass(frozen=True)
class Crash(ExecutionResult):
    reason: str


@dataclass(frozen=True)
class Success(ExecutionResult):
    value: Outcome

    def __str__(self) -> str:
        if isinstance(self.value, bytes):
            return f"Success({self.value.hex()})"
        if type(self.value) is int:
            return f"Success({self.value:#x})"
        return f"Success({self.value!r})"


def execute_with_reference(case: Case) -> ExecutionResult:
    """Evaluate the case with the reference semantics. The reference is total."""
    return Success(run_reference(case))


def execute_with_implementation(case: Case, impl: ModuleType) -> ExecutionResult:
    """Evaluate the case with the candidate and capture anything it raises."""
    try:
        return Success(run_candidate(case, impl))
    except Exception as e:
        return Crash(f"implementation raised exception: {e!r}")


def compare_results(expected: ExecutionResult, actual: ExecutionResult) -> bool:
    """
    Compare execution results for equivalence.

    Crashes match any crash (regardless of message). Success only matches
    an identical value.
    """
    return (
        type(expected) == type(actual) and
        (not isinstance(expected, Success) or expected == actual)
    )


# =============================================================================
# Statistics Tracking
# =============================================================================

@dataclass
class Mismatch:
    test_num: int
    case: Case
    expected: ExecutionResult
    actual: ExecutionResult


@dataclass
class FuzzingStatistics:
    """Tracks conformance run statistics."""
    total_tests: int = 0
    bugs_found: int = 0
    crashes: int = 0
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def correct_tests(self) -> int:
        return self.total_tests - self.bugs_found

    @property
    def bug_rate(self) -> float:
        return (self.bugs_found / self.total_tests * 100) if self.total_tests > 0 else 0.0

    @property
    def failing_operations(self) -> List[str]:
        """Operation names with at least one mismatch, in first-seen order."""
        return list(dict.fromkeys(m.case.operation for m in self.mismatches))

    def record_test(self, case: Case, expected: ExecutionResult, actual: ExecutionResult,
                    results_match: bool) -> None:
        """Record results of a single test."""
        self.total_tests += 1

        if isinstance(actual, Crash):
            self.crashes += 1

        if not results_match:
            self.bugs_found += 1
            self.mismatches.append(Mismatch(self.total_tests, case, expected, actual))

    def print_summary(self) -> None:
        """Print formatted summary of results."""
        print("\n" + "=" * 60)
        print("Fuzzer Summary")
        print("-" * 40)
        print(f"Total tests run:           {self.total_tests}")
        print(f"Bugs found:                {self.bugs_found}")
        print(f"Impl crashes:              {self.crashes}")
        print(f"Correct:                   {self.correct_tests}")

        if self.bugs_found > 0:
            print(f"Bug detection rate:        {self.bug_rate:.1f}%")
            print(f"Failing operations:        {', '.join(self.failing_operations)}")
        else:
            print("\nNo bugs detected!")


# =============================================================================
# Bug Reporting
# =============================================================================

def report_bug(mismatch: Mismatch) -> None:
    """Print detailed bug report."""
    print(f"\nTest {mismatch.test_num}: Bug found")
    print(f"  Case:     {mismatch.case}")
    print(f"  Expected: {mismatch.expected}")
    print(f"  Actual:   {mismatch.actual}")


def print_header(num_tests: int, impl: str, generator: str) -> None:
    """Print fuzzer run header."""
    print(f"evmsem Fuzzer - Running {num_tests} tests")
    print(f"Testing: {impl}")
    print(f"Generator: {generator}")
    print("=" * 60)


# =============================================================================
# Fuzzer Main Logic
# =============================================================================

def run_single_test(case: Case, impl: ModuleType) -> tuple[ExecutionResult, ExecutionResult, bool]:
    """
    Run a single conformance case.

    Returns:
        Tuple of (reference_result, impl_result, results_match)
    """
    expected = execute_with_reference(case)
    actual = execute_with_implementation(case, impl)
    return expected, actual, compare_results(expected, actual)


def run_conformance(cases: Iterable[Case], impl: ModuleType) -> FuzzingStatistics:
    """Check every case against ``impl`` and collect statistics. Prints nothing."""
    stats = FuzzingStatistics()
    for case in cases:
        expected, actual, matches = run_single_test(case, impl)
        stats.record_test(case, expected, actual, matches)
        if not matches:
            logger.warning("mismatch on %s: expected %s, got %s", case, expected, actual)
    return stats


def run_fuzzer(
    num_tests: int = 1000,
    seed: Optional[int] = None,
    impl: str = "v1",
    generator: str = "random",
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> FuzzingStatistics:
    """
    Run the fuzzer for a specified number of tests.

    Args:
        num_tests: Number of random test cases to generate
        seed: Random seed for reproducibility
        impl: Which implementation to test (auto-discovered from implementations/v*.py)
        generator: Generator type: "random", "boundary", or "mixed"
        config: Generator limits

    Returns:
        FuzzingStatistics object with results

    Raises:
        ValueError: If impl or generator is unknown
    """
    if generator not in GENERATORS:
        raise ValueError(f"Unknown generator: {generator}. Available: {', '.join(GENERATORS)}")

    rng = random.Random(seed)
    candidate = get_implementation(impl)
    generator_func = GENERATORS[generator]

    print_header(num_tests, impl, generator)
    logger.info("fuzzing %s with %s generator, seed=%s", impl, generator, seed)

    cases = (generator_func(rng, config) for _ in range(num_tests))
    stats = run_conformance(cases, candidate)

    for mismatch in stats.mismatches:
        report_bug(mismatch)

    stats.print_summary()
    logger.info("%s: %d/%d cases disagree", impl, stats.bugs_found, stats.total_tests)
    return stats


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    versions = get_available_versions()
    parser = argparse.ArgumentParser(description="Differential fuzzer for 256-bit word semantics")
    parser.add_argument(
        "-n", "--num-tests",
        type=int,
        default=1000,
        help="Number of random test cases to run (default: 1000)"
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "-i", "--impl",
        type=str,
        default=versions[0],
        choices=versions,
        help=f"Implementation to test. Available: {', '.join(versions)} (default: %(default)s)"
    )
    parser.add_argument(
        "-g", "--generator",
        type=str,
        default="random",
        choices=list(GENERATORS),
        help="Generator type: 'random', 'boundary', or 'mixed' (default: random)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="ERROR",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    stats = run_fuzzer(
        num_tests=args.num_tests,
        seed=args.seed,
        impl=args.impl,
        generator=args.generator
    )
    return 1 if stats.bugs_found else 0


if __name__ == "__main__":
    raise SystemExit(main())
