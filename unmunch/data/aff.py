"""
The module represents data from Hunspell's ``*.aff`` file, in the part that is needed to expand
a dictionary into a full list of word forms.

This text file has the following format:

.. code-block:: text

    # comment
    DIRECTIVE_NAME value1 value2 value 3

    # affix tables
    SFX <flag> <crossproduct> <num_of_rows>
    SFX <flag> <strip> <add>[/<flags>] <condition> [<tags>]
    # ...

Only ``FLAG``, ``SET``, ``TRY``, ``NEEDAFFIX`` and ``PFX``/``SFX`` tables are meaningful here,
see :mod:`readers.aff <unmunch.readers.aff>` for how they are read.

``Aff``
-------

.. autoclass:: Aff

``Rule`` and ``Affix``
----------------------

.. autoclass:: Kind
.. autoclass:: Rule
.. autoclass:: Affix
    :members:
"""

import re
import logging
from enum import Enum
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

#: Which edge of the stem the affix is attached to
Kind = Enum('Kind', 'PREFIX SUFFIX')

#: Conditions meaning "any stem"
ALWAYS = ('', '.')

# Bracket expression, or a dash outside of it
DASH_REGEXP = re.compile(r'(\[[^\]]*\])|-')


def _prefix_pattern(condition: str) -> str:
    return '^(?:' + condition + ')'


def _suffix_pattern(condition: str) -> str:
    return '(?:' + condition + ')$'


def _prefix_surgery(stem: str, strip: str, add: str) -> Optional[str]:
    if not stem.startswith(strip):
        return None
    return add + stem[len(strip):]


def _suffix_surgery(stem: str, strip: str, add: str) -> Optional[str]:
    if not stem.endswith(strip):
        return None
    return stem[:len(stem) - len(strip)] + add


EDGES: Dict[Kind, Tuple[Callable[[str], str], Callable[[str, str, str], Optional[str]]]] = {
    Kind.PREFIX: (_prefix_pattern, _prefix_surgery),
    Kind.SUFFIX: (_suffix_pattern, _suffix_surgery),
}


@dataclass(frozen=True)
class Affix:
    """
    One row of the affix table. For example (from ``en_US.aff``):

    .. code-block:: text

        SFX N Y 3
        SFX N   e     ion        e
        SFX N   y     ication    y
        SFX N   0     en         [^ey]

    This defines suffix designated by flag ``N`` with 3 forms:

    * removes "e" and adds "ion" for words ending with "e" (animate => animation)
    * removes "y" and adds "ication" for words ending with "y" (amplify => amplification)
    * removes nothing and adds "en" for words ending with neither (befall => befallen)

    Row can also carry continuation flags (``SFX X 0 able/CD .`` -- the form with "able" may have
    affixes ``C`` and ``D`` itself) and morphological data tags after condition (``ds:able``).

    Prefixes and suffixes differ only in which edge of the stem is touched and how the condition
    is anchored, so there is one class with a :attr:`kind`.
    """

    #: Flag of the rule this affix belongs to
    flag: str
    #: Prefix or suffix
    kind: Kind
    #: What is stripped from the stem when the affix is applied
    strip: str
    #: What is added when the affix is applied
    add: str
    #: Condition against which stem should be checked to understand whether this affix is relevant
    condition: str = ''
    #: Flags the produced form has (in order they were specified)
    flags: Tuple[str, ...] = ()
    #: Data tags, like ``po:noun``
    data: Tuple[str, ...] = ()

    cond_regexp: Optional[re.Pattern] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self):
        if self.condition in ALWAYS:
            return

        anchor, _ = EDGES[self.kind]
        # Outside of brackets "-" is a regular word char (for ex., hu_HU), inside it is a range: [a-z]
        condition = DASH_REGEXP.sub(lambda m: m.group(1) or '\\-', self.condition)
        try:
            regexp = re.compile(anchor(condition))
        except re.error as e:
            logger.warning("%s: bad condition %r (%s), affix will apply to any stem", self.flag, self.condition, e)
            return

        object.__setattr__(self, 'cond_regexp', regexp)

    @property
    def always(self) -> bool:
        """
        Whether affix applies to any stem. Such affix, when met, finishes processing of its rule.
        """
        return self.cond_regexp is None

    def match(self, stem: str) -> bool:
        return self.always or self.cond_regexp.search(stem) is not None  # type: ignore

    def apply(self, stem: str) -> Optional[str]:
        """
        Produces a new form from the stem, or ``None`` if stem doesn't have the part the affix
        should strip. Condition is NOT checked here, see :meth:`match`.
        """
        _, surgery = EDGES[self.kind]
        return surgery(stem, self.strip, self.add)

    def __repr__(self):
        name = 'Prefix' if self.kind == Kind.PREFIX else 'Suffix'
        where = f"^{self.strip}[{self.condition}]" if self.kind == Kind.PREFIX else f"[{self.condition}]{self.strip}$"
        return (
            f"{name}({self.add}: {self.flag}" +
            (f"/{','.join(self.flags)}" if self.flags else '') +
            f", on {where})"
        )


@dataclass(frozen=True)
class Rule:
    """
    The whole ``PFX``/``SFX`` table, designated by one flag.
    """

    flag: str
    kind: Kind
    #: Parsed, but not used: forms are never produced with both prefix and suffix at once
    crossproduct: bool
    #: Number of rows declared by the table header
    count: int
    affixes: Tuple[Affix, ...] = ()
    #: Line of the table header in the source file
    line_no: int = 0


@dataclass(frozen=True)
class Aff:
    """
    Everything read from ``*.aff`` file. Created by :meth:`read_aff <unmunch.readers.aff.read_aff>`
    once, and then never changed.

    .. autoattribute:: rules
    .. autoattribute:: FLAG
    .. autoattribute:: SET
    .. autoattribute:: TRY
    .. autoattribute:: NEEDAFFIX
    """

    #: Rules by flag. One flag designates one rule, prefix or suffix.
    rules: Mapping[str, Rule] = field(default_factory=dict)

    #: Flag format: ``short`` (one char), ``long`` (two chars), ``num`` (comma-separated numbers)
    FLAG: str = 'short'
    #: Encoding declared by the file. Only UTF-8 is supported.
    SET: str = 'UTF-8'
    #: Letters to try when suggesting; not used
    TRY: str = ''
    #: Flag marking stems (or affixed forms) which are not words by themselves
    NEEDAFFIX: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'rules', MappingProxyType(dict(self.rules)))

