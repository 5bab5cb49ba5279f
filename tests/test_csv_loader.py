import pytest

from dropscan.exceptions import LoadError
from dropscan.loaders import CsvRowSource, strip_comments

LIST_WITH_COMMENTS = """\
# exported 2025-11-25
// generator: weekly drops
domain,traffic,price
; pending
shop.com,100,10

cloud-garden.io,,60
,,
"""


def test_strip_comments():
    lines = ['# a\n', '  // b\n', ';c\n', '\n', '   \n', 'domain\n', 'x.com # ok\n']

    assert list(strip_comments(lines)) == ['domain\n', 'x.com # ok\n']


def test_rows_skip_comments_and_blank_rows(tmp_path):
    path = tmp_path / "drops.csv"
    path.write_text(LIST_WITH_COMMENTS, encoding='utf-8')

    rows = list(CsvRowSource(path).rows())

    assert rows == [
        {'domain': 'shop.com', 'traffic': '100', 'price': '10'},
        {'domain': 'cloud-garden.io', 'traffic': '', 'price': '60'},
    ]


def test_byte_order_mark_is_ignored(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes(b'\xef\xbb\xbfdomain\nshop.com\n')

    assert list(CsvRowSource(path)) == [{'domain': 'shop.com'}]


def test_undecodable_file_raises_load_error(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_bytes(b'domain\n\xff\xfe.com\n')

    with pytest.raises(LoadError, match='Cannot decode bad.csv'):
        list(CsvRowSource(path).rows())


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError):
        list(CsvRowSource(tmp_path / "missing.csv").rows())


def test_cancel_stops_before_next_row(tmp_path):
    path = tmp_path / "drops.csv"
    path.write_text("domain\na.com\nb.com\nc.com\n", encoding='utf-8')
    source = CsvRowSource(path)

    rows = source.rows()
    first = next(rows)
    source.cancel()

    assert first == {'domain': 'a.com'}
    assert source.cancelled
    assert list(rows) == []


def test_chunks(tmp_path):
    path = tmp_path / "drops.csv"
    path.write_text("domain\n" + "".join(f"d{i}.com\n" for i in range(5)), encoding='utf-8')

    chunks = list(CsvRowSource(path, chunk_rows=2).chunks())

    assert [len(chunk) for chunk in chunks] == [2, 2, 1]
    assert chunks[-1] == [{'domain': 'd4.com'}]
