from __future__ import annotations

from typing import Iterator, Union

from unmunch import data, readers
from unmunch.readers.file_reader import FileReader
from unmunch.algo import expand


class Dictionary:
    """
    The main and only interface to ``unmunch`` as a library.

    Usage::

        from unmunch import Dictionary

        dictionary = Dictionary.from_files('/path/to/dictionary/en_US.aff')

        # all forms of one entry
        print([*dictionary.expand('spell/JSMDRZG')])
        # ['spell', 'spells', "spell's", 'spelled', ...]

        # all forms of the whole dictionary, lazily
        for word in dictionary.unmunch('/path/to/dictionary/en_US.dic'):
            print(word)

    Rules are read once, and the ``*.dic`` file is streamed: entries are expanded one by one and
    never stored.

    Internal algorithm implementation :attr:`expander` is exposed in order to allow experimenting
    with the implementation::

        for form in dictionary.expander.forms('wednesday/S po:noun'):
            print(form.text, form.data)

    **Dictionary creation**

    .. automethod:: from_files

    **Dictionary usage**

    .. automethod:: expand
    .. automethod:: unmunch
    .. automethod:: forms

    **Data objects**

    .. autoattribute:: aff
    .. autoattribute:: context

    **Algorithms**

    .. autoattribute:: expander
    """

    #: Contents of ``*.aff``
    aff: data.aff.Aff
    #: Settings read from ``*.aff`` which are necessary to read ``*.dic``
    context: readers.aff.Context

    #: Instance of ``Expander``, can be used for experimenting, see :mod:`algo.expand <unmunch.algo.expand>`.
    expander: expand.Expander

    @classmethod
    def from_files(cls, aff_path: str, *, max_depth: int = expand.DEFAULT_MAX_DEPTH) -> Dictionary:
        """
        Read rules from ``/some/path/some_name.aff``.

        Args:
            aff_path: Path to ``*.aff`` file
            max_depth: How many affixes could be applied one after another
        """

        with FileReader(aff_path) as source:
            aff, context = readers.read_aff(source)

        return cls(aff, context, max_depth=max_depth)

    def __init__(self, aff: data.aff.Aff, context: readers.aff.Context, *,
                 max_depth: int = expand.DEFAULT_MAX_DEPTH):
        self.aff = aff
        self.context = context

        self.expander = expand.Expander(self.aff, self.context, max_depth=max_depth)

    def expand(self, entry: Union[str, data.dic.Word]) -> Iterator[str]:
        """
        All forms of one dictionary entry::

            >>> [*dictionary.expand('cat/A')]
            ['cat', 'cats']

        Args:
            entry: Dictionary line, or already parsed word
        """

        yield from self.expander(entry)

    def unmunch(self, dic_path: str) -> Iterator[str]:
        """
        All forms of all entries in ``*.dic`` file, in the order of entries.

        Args:
            dic_path: Path to ``*.dic`` file
        """

        for form in self.forms(dic_path):
            yield form.text

    def forms(self, dic_path: str) -> Iterator[expand.Form]:
        """
        Same as :meth:`unmunch`, but produces :class:`Form <unmunch.algo.expand.Form>` objects, having
        data tags along with word text.
        """

        with FileReader(dic_path, encoding=self.context.encoding) as source:
            for word in readers.read_dic(source, context=self.context):
                yield from self.expander.forms(word)
