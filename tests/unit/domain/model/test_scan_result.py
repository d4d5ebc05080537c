"""Tests for domain/model/scan_result.py."""

from tests.factories import make_binding, make_injection, make_scan_result
from wiregen.domain.model.scan_result import ScanResult


class TestScanResultMerge:
    """Tests for ScanResult.merge()."""

    def test_merge_of_nothing_is_empty(self) -> None:
        merged = ScanResult.merge([])
        assert merged.is_empty
        assert merged == ScanResult.empty()

    def test_bindings_deduplicated_first_wins(self) -> None:
        first = make_binding("A", "Impl", line=1)
        again = make_binding("A", "Impl", line=9, file="/second.py")
        merged = ScanResult.merge(
            [make_scan_result(bindings=(first,)), make_scan_result(bindings=(again,))]
        )
        assert merged.bindings == (first,)
        assert merged.bindings[0].location.line == 1

    def test_bindings_keep_discovery_order(self) -> None:
        a = make_binding("A")
        b = make_binding("B")
        c = make_binding("C")
        merged = ScanResult.merge(
            [make_scan_result(bindings=(b, a)), make_scan_result(bindings=(c, b))]
        )
        assert merged.bindings == (b, a, c)

    def test_injections_kept_as_is(self) -> None:
        i1 = make_injection("A", line=1)
        i2 = make_injection("A", line=1)
        merged = ScanResult.merge(
            [make_scan_result(injections=(i1,)), make_scan_result(injections=(i2,))]
        )
        assert len(merged.injections) == 2

    def test_conflicting_bindings_both_kept(self) -> None:
        merged = ScanResult.merge(
            [
                make_scan_result(bindings=(make_binding("A", "One"),)),
                make_scan_result(bindings=(make_binding("A", "Two"),)),
            ]
        )
        assert [b.implementation for b in merged.bindings] == ["One", "Two"]


class TestScanResultProperties:
    """Tests for derived properties."""

    def test_bound_types(self) -> None:
        result = make_scan_result(
            bindings=(make_binding("A", "X"), make_binding("B", "X"), make_binding("A", "Y"))
        )
        assert result.bound_types == frozenset({"A", "B"})

    def test_is_empty(self) -> None:
        assert ScanResult().is_empty
        assert not make_scan_result(injections=(make_injection("A"),)).is_empty
