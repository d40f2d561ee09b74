import pytest

from locpairs.data.pairs_data import (LineStats, parse_int32, parse_pair,
                                      iter_pairs, read_data_from_file)


def test_sample_columns(sample_file):
    left, right = read_data_from_file(str(sample_file))
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_malformed_lines_dropped(tmp_path):
    filepath = tmp_path / 'in.txt'
    filepath.write_text("3 4\nnotanumber\n5\n1 2 3\n", encoding='utf-8')

    stats = LineStats()
    left, right = read_data_from_file(str(filepath), stats)

    assert left == [3]
    assert right == [4]
    assert stats == LineStats(lines_read=4, lines_kept=1, lines_skipped=3, lines_undecodable=0)


def test_garbage_tokens_filtered_to_two():
    assert parse_pair("x 1 y 2") == (1, 2)
    assert parse_pair("1 abc") is None


def test_signs_and_line_endings():
    assert parse_pair("+1 -2\r\n") == (1, -2)
    assert parse_pair("\t7\t\t8   ") == (7, 8)


def test_int32_range():
    assert parse_int32("2147483647") == 2147483647
    assert parse_int32("-2147483648") == -2147483648
    assert parse_int32("2147483648") is None
    assert parse_int32("-2147483649") is None
    assert parse_pair("1 2147483648") is None


@pytest.mark.parametrize('token', ['1.5', '1_000', '0x10', '--1', '+', '', '١٢'])
def test_non_decimal_tokens_rejected(token):
    assert parse_int32(token) is None


def test_iter_pairs_keeps_order():
    lines = ["10 20", "", "oops", "30 40", "50 60 70"]
    assert list(iter_pairs(lines)) == [(10, 20), (30, 40)]


def test_undecodable_line_skipped(tmp_path):
    filepath = tmp_path / 'in.txt'
    filepath.write_bytes(b"1 2\n\xff\xfe 3 4\n5 6\n")

    stats = LineStats()
    left, right = read_data_from_file(str(filepath), stats)

    assert left == [1, 5]
    assert right == [2, 6]
    assert stats.lines_undecodable == 1
    assert stats.lines_read == 3


def test_empty_file(tmp_path):
    filepath = tmp_path / 'empty.txt'
    filepath.write_text("", encoding='utf-8')
    assert read_data_from_file(str(filepath)) == ([], [])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data_from_file(str(tmp_path / 'missing.txt'))


def test_directory_is_io_error(tmp_path):
    with pytest.raises(OSError):
        read_data_from_file(str(tmp_path))
