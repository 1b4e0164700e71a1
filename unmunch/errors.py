"""
Errors that abort the whole run. Everything else the readers and the expander stumble upon
(unknown directives, duplicate rules, bad conditions, unknown flags) is only logged.

.. autoclass:: UnmunchError
.. autoclass:: TruncatedAffixBlock
.. autoclass:: BadWordCount
"""


class UnmunchError(Exception):
    pass


class TruncatedAffixBlock(UnmunchError):
    """
    ``PFX``/``SFX`` header declared more rows than there are left in the file.
    """

    def __init__(self, flag: str, expected: int, found: int, line_no: int):
        self.flag = flag
        self.expected = expected
        self.found = found
        self.line_no = line_no
        super().__init__(
            f"{flag}: affix block at line {line_no} declares {expected} rows, "
            f"file ends after {found}"
        )


class BadWordCount(UnmunchError):
    """
    First line of ``*.dic`` file is not a word count.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"dictionary should start with word count, got {line!r}")
