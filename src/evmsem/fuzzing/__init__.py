"""Conformance checking of candidate implementations against the reference semantics."""

from .case import Case, InvalidCandidateResult, run_reference, run_candidate

from .fuzzer import (
    ExecutionResult, Success, Crash,
    FuzzingStatistics, GeneratorConfig,
    run_conformance, run_fuzzer,
)

from .enumeration import (
    BOUNDARY_WORDS, MINIMAL_WORDS,
    generate_comprehensive_suite,
)
