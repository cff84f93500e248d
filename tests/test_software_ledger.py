"""
Software ledger tests.

Tests cover:
- Splitting answers and skipping no-data sentinels
- Accumulation per platform
- Merge properties (commutative, associative, matches a single pass)
- Stable sorting in both directions
"""

import pytest

from labsurvey.engines import SoftwareLedger
from labsurvey.models import Platform, SoftwareEntry, SortDirection
from labsurvey.normalize import software_key

from tests.conftest import make_row


def by_key(entries):
    return {
        software_key(e.name): (e.windows_count, e.linux_count, e.recommended_count)
        for e in entries
    }


@pytest.fixture
def ledger():
    return SoftwareLedger()


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------

class TestSplitMentions:
    def test_trims_and_drops_empty_tokens(self):
        assert SoftwareLedger.split_mentions(" R ,Excel,, ") == ["R", "Excel"]

    @pytest.mark.parametrize("text", ["", "  ", "Ninguno", "NINGUNA", "ninguno "])
    def test_no_data(self, text):
        assert SoftwareLedger.split_mentions(text) == []


# ---------------------------------------------------------------------------
# Accumulation
# ---------------------------------------------------------------------------

class TestAccumulate:
    def test_counts_per_platform(self, ledger):
        rows = [make_row(windows="R, Excel", linux="R")]
        entries = ledger.accumulate(rows)
        assert by_key(entries) == {"r": (1, 1, 0), "excel": (1, 0, 0)}
        assert [e.total for e in entries] == [2, 1]

    def test_case_and_spacing_fold_into_one_entry(self, ledger):
        rows = [
            make_row(windows="MATLAB"),
            make_row(windows="matlab "),
            make_row(recommended="Matlab"),
        ]
        entries = ledger.accumulate(rows)
        assert len(entries) == 1
        assert entries[0].name == "MATLAB"
        assert entries[0].total == 3

    def test_punctuation_is_significant(self, ledger):
        entries = ledger.accumulate([make_row(windows="C, C++")])
        assert [e.name for e in entries] == ["C", "C++"]

    def test_sentinels_contribute_nothing(self, ledger):
        rows = [make_row(windows="Ninguno", linux="ninguna", recommended="")]
        assert ledger.accumulate(rows) == []

    def test_single_platform(self, ledger):
        rows = [make_row(windows="R", linux="Octave")]
        entries = ledger.accumulate(rows, platforms=(Platform.LINUX,))
        assert [e.name for e in entries] == ["Octave"]


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------

class TestMerge:
    @pytest.fixture
    def parts(self, ledger):
        return [
            ledger.accumulate([make_row(windows="R, Excel", linux="R")]),
            ledger.accumulate([make_row(windows="excel", recommended="SPSS")]),
            ledger.accumulate([make_row(linux="R, Octave")]),
        ]

    def test_commutative(self, ledger, parts):
        a, b, _ = parts
        assert by_key(ledger.merge(a, b)) == by_key(ledger.merge(b, a))

    def test_associative(self, ledger, parts):
        a, b, c = parts
        left = ledger.merge(ledger.merge(a, b), c)
        right = ledger.merge(a, ledger.merge(b, c))
        assert by_key(left) == by_key(right)

    def test_matches_single_pass(self, ledger, parts):
        rows = [
            make_row(windows="R, Excel", linux="R"),
            make_row(windows="excel", recommended="SPSS"),
            make_row(linux="R, Octave"),
        ]
        a, b, c = parts
        assert by_key(ledger.merge(ledger.merge(a, b), c)) == by_key(ledger.accumulate(rows))

    def test_inputs_are_not_modified(self, ledger):
        a = [SoftwareEntry("R", windows_count=1)]
        b = [SoftwareEntry("r", windows_count=2)]
        merged = ledger.merge(a, b)
        assert merged[0].windows_count == 3
        assert a[0].windows_count == 1
        assert b[0].windows_count == 2

    def test_name_comes_from_first_ledger(self, ledger):
        merged = ledger.merge([SoftwareEntry("Excel", 1)], [SoftwareEntry("EXCEL", 1)])
        assert merged[0].name == "Excel"


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

class TestSort:
    @pytest.fixture
    def entries(self):
        return [
            SoftwareEntry("A", windows_count=1),
            SoftwareEntry("B", windows_count=3),
            SoftwareEntry("C", linux_count=1),
            SoftwareEntry("D", windows_count=2),
        ]

    def test_descending(self, ledger, entries):
        result = ledger.sort_by_total_mentions(entries)
        assert [e.name for e in result] == ["B", "D", "A", "C"]

    def test_ascending(self, ledger, entries):
        result = ledger.sort_by_total_mentions(entries, SortDirection.ASC)
        assert [e.name for e in result] == ["A", "C", "D", "B"]

    def test_toggle_reverses_distinct_totals_and_keeps_ties(self, ledger, entries):
        desc = ledger.sort_by_total_mentions(entries, SortDirection.DESC)
        asc = ledger.sort_by_total_mentions(entries, SortDirection.DESC.toggled())
        assert [e.total for e in asc] == list(reversed([e.total for e in desc]))
        # A and C tie at 1 and keep their input order either way
        assert [e.name for e in desc if e.total == 1] == ["A", "C"]
        assert [e.name for e in asc if e.total == 1] == ["A", "C"]

    def test_input_list_untouched(self, ledger, entries):
        ledger.sort_by_total_mentions(entries)
        assert [e.name for e in entries] == ["A", "B", "C", "D"]


class TestDistinctNames:
    def test_alphabetical_first_spelling(self, ledger):
        rows = [make_row(windows="excel, R"), make_row(linux="Excel, apache")]
        assert ledger.distinct_names(rows) == ["apache", "excel", "R"]


def test_end_to_end_two_rows(ledger):
    rows = [
        make_row(windows="R, Excel", linux="Ninguno"),
        make_row(windows="r", recommended="NINGUNA"),
    ]
    entries = ledger.sort_by_total_mentions(ledger.accumulate(rows))
    assert [(e.name, e.total) for e in entries] == [("R", 2), ("Excel", 1)]
