"""Test part-number and gear-ratio resolution over whole grids."""

import pytest

from gearscan.errors import ScanError
from gearscan.scanner import ScanResult, Scanner, scan

from .conftest import CANONICAL


class TestCanonical:
    def test_sums(self):
        assert scan(CANONICAL) == ScanResult(4361, 467835)

    def test_str(self):
        assert str(scan(CANONICAL)) == "(4361, 467835)"

    def test_ledger(self, scan_ledger):
        scanner = scan_ledger(CANONICAL)
        assert scanner.gears.values(3, 1) == [467, 35]
        assert scanner.gears.values(3, 4) == [617]
        assert scanner.gears.values(5, 8) == [755, 598]

    def test_rescan_is_identical(self):
        assert scan(CANONICAL) == scan(CANONICAL)

    def test_package_exports(self):
        import gearscan

        assert gearscan.scan(CANONICAL) == gearscan.ScanResult(4361, 467835)

    def test_feed_in_pieces(self):
        scanner = Scanner()
        for line in CANONICAL.splitlines(keepends=True):
            scanner.feed(line)
        assert scanner.finish() == ScanResult(4361, 467835)


class TestNoSymbols:
    def test_single_row(self, scan_grid):
        assert scan_grid("467..114..") == ScanResult(0, 0)

    def test_digits_and_dots(self, scan_grid):
        result = scan_grid(
            """
            12..34
            ..56..
            7....8
            """
        )
        assert result == ScanResult(0, 0)

    def test_empty_input(self):
        assert scan("") == ScanResult(0, 0)


class TestAdjacency:
    def test_symbol_right(self, scan_grid):
        assert scan_grid("12#.").part_sum == 12

    def test_symbol_left(self, scan_grid):
        assert scan_grid(".#12").part_sum == 12

    def test_gap_is_not_adjacent(self, scan_grid):
        assert scan_grid("12.#.34").part_sum == 0

    def test_symbol_above(self, scan_grid):
        result = scan_grid(
            """
            ...#
            ..7.
            """
        )
        assert result.part_sum == 7

    def test_symbol_below(self, scan_grid):
        result = scan_grid(
            """
            .7..
            ..#.
            """
        )
        assert result.part_sum == 7

    def test_two_rows_apart_is_not_adjacent(self, scan_grid):
        result = scan_grid(
            """
            .7..
            ....
            .#..
            """
        )
        assert result.part_sum == 0

    def test_diagonal_below_at_first_and_last_column(self, scan_grid):
        result = scan_grid(
            """
            12....34
            ..#..#..
            """
        )
        assert result.part_sum == 46

    def test_diagonal_above_at_first_and_last_column(self, scan_grid):
        result = scan_grid(
            """
            ..$..%..
            12....34
            """
        )
        assert result.part_sum == 46

    def test_directly_below_first_column(self, scan_grid):
        result = scan_grid(
            """
            5.
            #.
            """
        )
        assert result.part_sum == 5

    def test_crlf_rows(self):
        assert scan("12\r\n*.\r\n") == ScanResult(12, 0)


class TestNoDoubleCounting:
    def test_two_symbols_below(self, scan_grid):
        result = scan_grid(
            """
            .12.
            #..#
            """
        )
        assert result.part_sum == 12

    def test_surrounded(self, scan_grid):
        result = scan_grid(
            """
            ###
            #5#
            ###
            """
        )
        assert result.part_sum == 5

    def test_above_and_below(self, scan_grid):
        result = scan_grid(
            """
            #...
            .5..
            ..#.
            """
        )
        assert result.part_sum == 5

    def test_same_value_twice_counts_twice(self, scan_grid):
        result = scan_grid(
            """
            5#5
            """
        )
        assert result.part_sum == 10


class TestGears:
    def test_same_row_pair(self, scan_grid):
        assert scan_grid("2*3") == ScanResult(5, 6)

    def test_pair_above(self, scan_grid):
        result = scan_grid(
            """
            .*.
            4.6
            """
        )
        assert result == ScanResult(10, 24)

    def test_pair_below(self, scan_grid):
        result = scan_grid(
            """
            4.6
            .*.
            """
        )
        assert result == ScanResult(10, 24)

    def test_single_number(self, scan_grid):
        assert scan_grid("5*.") == ScanResult(5, 0)

    def test_three_numbers(self, scan_grid, scan_ledger):
        source = """
            1.2
            .*.
            ..3
            """
        assert scan_grid(source) == ScanResult(6, 0)
        assert scan_ledger(source).gears.values(1, 1) == [1, 2, 3]

    def test_lonely_gear(self, scan_grid):
        assert scan_grid("..*..") == ScanResult(0, 0)

    def test_plain_symbol_is_not_a_gear(self, scan_grid):
        assert scan_grid("2#3") == ScanResult(5, 0)

    def test_counted_number_still_registers_below(self, scan_ledger):
        scanner = scan_ledger(
            """
            5#
            *.
            """
        )
        assert scanner.part_sum == 5
        assert scanner.gears.values(0, 1) == [5]

    def test_gear_left_of_number_closed_by_symbol(self, scan_ledger):
        scanner = scan_ledger("*12#")
        assert scanner.gears.values(0, 0) == [12]

    def test_two_gears_same_pair(self, scan_grid, scan_ledger):
        source = """
            10..
            .**.
            ..20
            """
        assert scan_grid(source) == ScanResult(30, 400)
        scanner = scan_ledger(source)
        assert scanner.gears.values(1, 1) == [10, 20]
        assert scanner.gears.values(2, 1) == [10, 20]


class TestTrailingNewline:
    def test_last_number_dropped_without_newline(self):
        assert scan("*12") == ScanResult(0, 0)

    def test_closed_number_kept_without_newline(self):
        assert scan("12*") == ScanResult(12, 0)

    def test_symbol_below_without_newline(self):
        assert scan("12.\n#..") == ScanResult(12, 0)


class TestErrors:
    def test_malformed_number(self):
        with pytest.raises(ScanError) as exc_info:
            scan("..\n.1²3*\n")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 2
        assert err.length == 3
        assert err.source_line == ".1²3*"
