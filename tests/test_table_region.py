"""
Tests for header location and the end-of-table blank-streak heuristic.
"""
from detection import TableRegionDetector, find_header_row, is_section_marker
from utils.cells import to_text


def _blank(row):
    return not any(to_text(c) for c in row)


def _data(n):
    return [f"row {n}", n]


class TestFindHeaderRow:

    def test_case_insensitive_substring(self):
        rows = [["Estimate"], [None, "POSITION / item", "Units"], ["x"]]
        assert find_header_row(rows, "position") == 1

    def test_any_of_several_markers(self):
        rows = [["Menu"], ["№", "Позиция", "Ед."]]
        assert find_header_row(rows, ("position", "позиция")) == 1

    def test_not_found(self):
        assert find_header_row([["a"], ["b"]], "position") is None
        assert find_header_row([], "position") is None

    def test_numbers_never_match(self):
        rows = [[12345], ["Position"]]
        assert find_header_row(rows, "123") is None

    def test_column_restriction(self):
        rows = [[None, "Статья"], ["Статья расходов", "Цена"]]
        assert find_header_row(rows, "статья", column=0) == 1

    def test_numbers_never_match_in_column(self):
        rows = [[2025], ["2025 budget"]]
        assert find_header_row(rows, "2025", column=0) == 1

    def test_max_rows_bounds_the_scan(self):
        rows = [["a"], ["b"], ["Position"]]
        assert find_header_row(rows, "position", max_rows=2) is None
        assert find_header_row(rows, "position", max_rows=3) == 2


class TestTableRegionDetector:

    def test_spacer_row_is_skipped_and_blank_tail_ends_table(self):
        rows = (
            [_data(1), _data(2), _data(3)]
            + [[None, None]]
            + [_data(4), _data(5)]
            + [[None, None]] * 8
            + [["Trailing note"]]
        )
        detector = TableRegionDetector(_blank)

        body = [row for _, row in detector.iter_body(rows, 0)]

        assert [r[0] for r in body] == ["row 1", "row 2", "row 3", "row 4", "row 5"]

    def test_short_blank_runs_do_not_end_table(self):
        rows = [_data(1)] + [[]] * 5 + [_data(2)]
        detector = TableRegionDetector(_blank)

        body = [row for _, row in detector.iter_body(rows, 0)]

        assert len(body) == 2

    def test_six_blank_rows_end_table(self):
        rows = [_data(1)] + [[]] * 6 + [_data(2)]
        detector = TableRegionDetector(_blank)

        body = [row for _, row in detector.iter_body(rows, 0)]

        assert len(body) == 1

    def test_blank_run_at_sheet_end(self):
        rows = [_data(1), [], []]
        detector = TableRegionDetector(_blank)
        assert detector.blank_streak(rows, 1) == 2
        assert not detector.ends_table(rows, 1)
        assert len(list(detector.iter_body(rows, 0))) == 1

    def test_streak_is_capped_by_lookahead(self):
        rows = [[]] * 20
        detector = TableRegionDetector(_blank, lookahead=4, min_streak=3)
        assert detector.blank_streak(rows, 0) == 4
        assert detector.ends_table(rows, 0)

    def test_start_past_end(self):
        detector = TableRegionDetector(_blank)
        assert list(detector.iter_body([_data(1)], 5)) == []

    def test_none_rows_are_blank(self):
        rows = [_data(1), None, _data(2)]
        detector = TableRegionDetector(_blank)
        assert [i for i, _ in detector.iter_body(rows, 0)] == [0, 2]

    def test_thresholds_follow_environment(self, monkeypatch):
        from detection import constants

        monkeypatch.setattr(constants, "EMPTY_STREAK_MIN", 2)
        rows = [_data(1), [], [], _data(2)]

        body = list(TableRegionDetector(_blank).iter_body(rows, 0))

        assert len(body) == 1


class TestSectionMarker:

    def test_label_with_zero_numbers(self):
        assert is_section_marker("Catering", (0, 0, 0))

    def test_label_with_amount_is_data(self):
        assert not is_section_marker("Catering", (0, 12.5, 0))

    def test_empty_label_is_not_a_marker(self):
        assert not is_section_marker("", (0, 0))
