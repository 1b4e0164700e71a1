import io

from unmunch.readers import FileReader


def test_stringio():
    strigio = io.StringIO("""line

    # empty, too
    content
  """)

    reader = FileReader(strigio)

    assert list(reader) == [(1, 'line'), (3, '# empty, too'), (4, 'content')]


def test_bom():
    reader = FileReader(io.StringIO("\ufeff3\ncat\n"))

    assert list(reader) == [(1, '3'), (2, 'cat')]


def test_file(tmp_path):
    path = tmp_path / 'words.dic'
    path.write_text('2\nкот/S\n\ndog\n', encoding='utf-8')

    with FileReader(str(path)) as reader:
        assert list(reader) == [(1, '2'), (2, 'кот/S'), (4, 'dog')]
