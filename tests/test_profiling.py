"""Tests for decomment.profiling — scan profiling API."""

from decomment import strip_comments
from decomment.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_scan() as acc:
            assert get_scan_accumulator() is acc

    def test_records_scan_call(self) -> None:
        with profiled_scan() as acc:
            strip_comments("a//b\n/*c*/")
        assert acc.scan_calls == 1
        assert acc.source_length == 10
        assert acc.output_length == 1
        assert acc.comments_removed == 2

    def test_records_multiple_scan_calls(self) -> None:
        with profiled_scan() as acc:
            strip_comments("one")
            strip_comments("two // 2")
            strip_comments("'three // 3'")
        assert acc.scan_calls == 3
        assert acc.comments_removed == 1

    def test_total_duration_positive(self) -> None:
        with profiled_scan() as acc:
            strip_comments("x /* y */ z")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ScanAccumulator().summary()
        assert summary["scan_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["output_length"] == 0
        assert summary["comments_removed"] == 0

    def test_summary_after_scan(self) -> None:
        with profiled_scan() as acc:
            strip_comments("code // note\n")
        summary = acc.summary()
        assert summary["scan_calls"] == 1
        assert summary["source_length"] == len("code // note\n")
        assert summary["output_length"] == len("code \n")
        assert "total_ms" in summary
