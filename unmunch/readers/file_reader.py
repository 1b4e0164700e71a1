"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
"""

from typing import Iterator, Tuple

BOM = '\ufeff'


class BaseReader:
    """
    Common base for line readers. In fact, it is a very thin wrapper around ``IO``-alike object,
    to read it line by line and:

    * strip lines transparently
    * ignore BOM (byte-order mark) at the beginning
    * skip empty lines
    * yield line with its number (1-based)

    Both ``.aff`` and ``.dic`` readers pull lines from the same iterator they were given, so one
    directive may consume several following lines::

        for line_no, line in reader:
            if line.startswith('SFX'):
                rows = itertools.islice(reader, count)
    """

    def __init__(self, obj):
        self.line_no = 0
        self.io = obj
        self.iter = filter(lambda l: l[1] != '', self.readlines())

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, str]:
        return self.iter.__next__()

    def readlines(self) -> Iterator[Tuple[int, str]]:
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            if self.line_no == 1 and ln.startswith(BOM):
                ln = ln[len(BOM):]
            yield (self.line_no, ln.strip())
            ln = self.io.readline()

    def close(self):
        self.io.close()

    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        self.close()


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file (or anything already opened, like ``io.StringIO``,
    which is handy in tests).

    Both dictionary files are expected to be UTF-8; bytes that aren't are kept as surrogates
    instead of failing the whole run.
    """

    def __init__(self, path, encoding='UTF-8'):
        self.path = path
        if hasattr(path, 'readline'):
            super().__init__(path)
        else:
            super().__init__(self._open(path, encoding))

    def _open(self, path, encoding):  # pylint: disable=no-self-use
        return open(path, 'r', encoding=encoding, errors='surrogateescape')
