"""
The module represents one entry of Hunspell's ``*.dic`` file.

This text file has the following format:

.. code-block:: text

    124 # first line: number of entries

    # Each entry has form:

    cat/ABC ph:kat

Entries are never collected into a list: the file is read lazily, and each entry is expanded
and forgotten. The same :class:`Word` also represents the form produced by an affix, before it
is expanded further with the affix's own flags.

.. autoclass:: Word
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class Word:
    """
    One word (stem) of a .dic file.

    Each entry in the source contains something like:

    .. code-block:: text

        foo/ABC ph:phoo is:bar

    Where ``foo`` is the stem itself, ``ABC`` is word flags (flags meaning and format is defined by
    ``*.aff`` file), and ``ph:phoo is:bar`` are additional data tags (``ph`` is the tag and ``phoo``
    is the value). Both flags and tags can be absent.
    """

    #: Word stem
    stem: str
    #: Flags of the word, parsed depending on aff-file settings. ``ABCD`` might be parsed
    #: into ``("A", "B", "C", "D")`` (default flag format, "short"), or ``("AB", "CD")``
    #: ("long" flag format). Order is kept, and so are repeated flags.
    flags: Tuple[str, ...] = ()
    #: Raw values of data tags. Each tag can be repeated several times, like ``witch ph:wich ph:which``,
    #: that's why dictionary values are lists
    data: Dict[str, List[str]] = field(default_factory=dict)
    #: Line of the source file, 0 for words not read from the file
    line_no: int = 0

    def __repr__(self):
        return f"Word({self.stem} /{','.join(self.flags)})"
