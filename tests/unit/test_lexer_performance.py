"""
minic Lexer Performance Benchmark

Checks that scan time grows linearly with input size for plain code,
comment-heavy code and one long unterminated comment.
"""

import pytest
import time
from dataclasses import dataclass

from minic import Lexer


@dataclass
class ScanResult:
    """Results from a scan benchmark."""
    test_name: str
    input_bytes: int
    scan_time_ms: float
    token_count: int


def measure_scan_time(
    lexer: Lexer,
    source: str,
    iterations: int = 3,
    warmup: int = 1
) -> tuple[float, int]:
    """
    Measure tokenization time.

    Returns:
        (best_scan_time_ms, token_count)
    """
    for _ in range(warmup):
        lexer.tokenize_all(source)

    scan_times = []
    tokens = []
    for _ in range(iterations):
        start = time.perf_counter()
        tokens = lexer.tokenize_all(source)
        end = time.perf_counter()
        scan_times.append((end - start) * 1000)

    return min(scan_times), len(tokens)


FUNCTION = "int f{i}(void) {{ return {i}; }}\n"
COMMENTED_FUNCTION = "/* block {i} */ int f{i}(void) // line\n{{ return {i}; }}\n"

TEST_PROGRAMS = {
    "plain": lambda n: "".join(FUNCTION.format(i=i) for i in range(n)),
    "commented": lambda n: "".join(COMMENTED_FUNCTION.format(i=i) for i in range(n)),
    "unterminated_comment": lambda n: "int x; /*" + " never closed" * (n * 2),
}


@pytest.mark.performance
class TestLexerPerformance:
    """Performance tests for the minic lexer."""

    @pytest.fixture
    def lexer(self):
        return Lexer()

    @pytest.mark.parametrize("name", sorted(TEST_PROGRAMS))
    def test_scan_time_is_linear(self, lexer, name):
        """Ten times the input should not take anywhere near 100 times longer."""
        build = TEST_PROGRAMS[name]
        small = build(200)
        large = build(2000)

        small_ms, small_tokens = measure_scan_time(lexer, small)
        large_ms, large_tokens = measure_scan_time(lexer, large)

        print(f"\n{name}: {len(small)} bytes in {small_ms:.3f}ms, "
              f"{len(large)} bytes in {large_ms:.3f}ms")

        assert large_tokens >= small_tokens
        # Generous bound: timer noise dominates small inputs
        assert large_ms < max(small_ms, 1.0) * 40

    def test_token_counts(self, lexer):
        _, count = measure_scan_time(lexer, TEST_PROGRAMS["plain"](100), iterations=1)
        assert count == 100 * 10
