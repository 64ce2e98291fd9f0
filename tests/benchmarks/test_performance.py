"""Performance benchmark suite for json-inspector.

Covers the whole-tree operations that run on every analysis or diff:
- JsonAnalyzer.analyze on record arrays, deep and wide objects
- flatten / unflatten on nested objects
- compare on wide objects
- calculate_stats on record arrays

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from json_inspector import Grade, JsonAnalyzer
from json_inspector.processor import calculate_stats, compare, flatten, unflatten


class TestAnalyzePerformance:
    """Benchmarks for the full analysis pipeline."""

    def test_analyze_100_records(self, benchmark, records_100):  # type: ignore[no-untyped-def]
        analyzer = JsonAnalyzer()
        report = benchmark(analyzer.analyze, records_100)
        # Verify the result is valid (not just timing)
        assert 0 <= report.score <= 100
        assert report.grade in tuple(Grade)

    def test_analyze_2000_records(self, benchmark, records_2000):  # type: ignore[no-untyped-def]
        analyzer = JsonAnalyzer()
        report = benchmark(analyzer.analyze, records_2000)
        assert any("Large array" in s.message for s in report.suggestions)

    def test_analyze_deep(self, benchmark, nested_50):  # type: ignore[no-untyped-def]
        analyzer = JsonAnalyzer()
        report = benchmark(analyzer.analyze, nested_50)
        assert any(issue.type == "structure" for issue in report.issues)

    def test_analyze_wide(self, benchmark, wide_1000):  # type: ignore[no-untyped-def]
        analyzer = JsonAnalyzer()
        report = benchmark(analyzer.analyze, wide_1000)
        assert report.stats.keys == 1000


class TestTreeOperationPerformance:
    """Benchmarks for the processor helpers."""

    def test_flatten_deep(self, benchmark, nested_50):  # type: ignore[no-untyped-def]
        flat = benchmark(flatten, nested_50)
        assert len(flat) == 50 * 3

    def test_unflatten_deep(self, benchmark, nested_50):  # type: ignore[no-untyped-def]
        flat = flatten(nested_50)
        rebuilt = benchmark(unflatten, flat)
        assert rebuilt == nested_50

    def test_compare_wide(self, benchmark, pair_wide_1000):  # type: ignore[no-untyped-def]
        left, right = pair_wide_1000
        result = benchmark(compare, left, right)
        assert len(result.differences) == 100

    def test_stats_2000_records(self, benchmark, records_2000):  # type: ignore[no-untyped-def]
        stats = benchmark(calculate_stats, records_2000)
        # one record object plus one address object per record
        assert stats.objects == 4000
        assert stats.arrays == 1 + 2000
