"""

.. autofunction:: read_aff

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: read_directive
.. autofunction:: read_rule
.. autofunction:: make_affix

"""

import re
import logging
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from unmunch.data import aff
from unmunch.errors import TruncatedAffixBlock

from unmunch.readers.file_reader import BaseReader

logger = logging.getLogger(__name__)

# Outdated directive names
SYNONYMS = {'PSEUDOROOT': 'NEEDAFFIX'}

DIRECTIVES = ['FLAG', 'SET', 'TRY', 'NEEDAFFIX', 'PFX', 'SFX']
AFFIX_DIRECTIVES = ['PFX', 'SFX']

# "UTF-8" flags are one (unicode) char each, which in Python is the same as "short"
FLAG_FORMATS = ['short', 'long', 'num', 'UTF-8']

FLAG_LONG_REGEXP = re.compile(r'..')
FLAG_NUM_REGEXP = re.compile(r'\d+(?=,|$)')


@dataclass(frozen=True)
class Context:
    """
    Reading-time settings necessary for reading both .aff and .dic file, and for expanding words:
    flag format and the flag marking "not a word by itself" stems.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <unmunch.readers.dic.read_dic>`
    and by :class:`Expander <unmunch.algo.expand.Expander>`. Immutable: when ``.aff`` changes
    the setting while reading, the new ``Context`` is produced.
    """

    #: Flag format of dictionary (see :attr:`Aff.FLAG <unmunch.data.aff.Aff.FLAG>`)
    flag_format: str = 'short'

    #: Flag marking stems which can't be words without affixes (see :attr:`Aff.NEEDAFFIX <unmunch.data.aff.Aff.NEEDAFFIX>`),
    #: empty if not declared
    needaffix: str = ''

    #: Encoding of both files; the only one supported
    encoding: str = 'UTF-8'

    def parse_flag(self, string: str) -> str:
        """
        Parse singular flag, considering attr:`flag_format`.
        """
        flags = self.parse_flags(string)
        return flags[0] if flags else ''

    def parse_flags(self, string: Optional[str]) -> List[str]:
        """
        Parse list of flags, considering attr:`flag_format`. Order and repetitions are preserved::

            >>> Context(flag_format='num').parse_flags('12,7')
            ['12', '7']
        """

        if not string:
            return []

        if self.flag_format in ('short', 'UTF-8'):
            return list(string)
        if self.flag_format == 'long':
            if len(string) % 2:
                logger.warning("%r: odd number of chars for long flags, last one ignored", string)
            return FLAG_LONG_REGEXP.findall(string)
        if self.flag_format == 'num':
            return FLAG_NUM_REGEXP.findall(string)

        raise ValueError(f"Unknown flag format {self.flag_format}")


def read_aff(source: BaseReader) -> Tuple[aff.Aff, Context]:
    """
    Reads .aff file and creates an :class:`Aff <unmunch.data.aff.Aff>`.

    For each line (except comments) calls :meth:`read_directive` or, for affix tables, :meth:`read_rule`.
    Problems with file contents are logged and skipped; the only one aborting the reading is
    an affix table cut short by the end of file (:class:`TruncatedAffixBlock <unmunch.errors.TruncatedAffixBlock>`).

    Args:
         source: "Reader" (thin wrapper around opened file, targeting line-by-line reading)

    Returns:
        Aff itself and a :class:`Context` which then will be reused in
        :meth:`read_dic <unmunch.readers.dic.read_dic>`
    """

    data: Dict[str, Any] = {}
    rules: Dict[str, aff.Rule] = {}
    context = Context()

    unknown: Set[str] = set()
    # Tables with bad header: their rows look like headers too, and should be silently dropped
    discarded: Set[Tuple[str, str]] = set()

    for (line_no, line) in source:
        if line.startswith('#'):
            continue

        name, *arguments = line.split()
        name = SYNONYMS.get(name, name)

        if name not in DIRECTIVES:
            if name not in unknown:
                logger.warning("line %d: unknown directive %s, skipped", line_no, name)
                unknown.add(name)
            else:
                logger.debug("line %d: unknown directive %s, skipped", line_no, name)
            continue

        if name in AFFIX_DIRECTIVES:
            key = (name, arguments[0] if arguments else '')
            if key in discarded and not _looks_like_header(arguments):
                logger.debug("line %d: row of discarded table %s %s", line_no, *key)
                continue
            discarded.discard(key)

            rule = read_rule(source, name, *arguments, line_no=line_no, context=context)
            if rule is None:
                discarded.add(key)
                continue

            if rule.flag in rules:
                logger.warning("%s: duplicate rule at line %d (previous at line %d), the last one is used",
                               rule.flag, line_no, rules[rule.flag].line_no)
            rules[rule.flag] = rule
            continue

        dir_value = read_directive(line, line_no=line_no, context=context)
        if not dir_value:
            continue

        directive, value = dir_value

        if directive == 'FLAG':
            if 'FLAG' in data and data['FLAG'] != value:
                logger.error("line %d: FLAG %s redeclares FLAG %s, flags are read as %s from now on",
                             line_no, value, data['FLAG'], value)
            context = dataclasses.replace(context, flag_format=value)
        elif directive == 'NEEDAFFIX':
            if 'NEEDAFFIX' in data:
                logger.error("line %d: NEEDAFFIX declared twice, keeping %s", line_no, data['NEEDAFFIX'])
                continue
            context = dataclasses.replace(context, needaffix=value)
        elif directive == 'SET':
            if value.upper() != 'UTF-8':
                logger.warning("line %d: SET %s is not supported, reading as UTF-8", line_no, value)

        data[directive] = value

    for rule in rules.values():
        logger.debug("%s: %s", rule.flag, ', '.join(map(repr, rule.affixes)))
    logger.debug("%d rules read, flag format is %s", len(rules), context.flag_format)

    return (aff.Aff(rules=rules, **data), context)


def read_directive(line: str, *, line_no: int = 0, context: Context) -> Optional[Tuple[str, Any]]:
    """
    Read one-line directive (everything except affix tables) and parse its value.

    Returns ``None`` if the value is absent or malformed (after logging the problem).

    Args:
        line: current line read from source
        line_no: its number, for diagnostics
        context: current reading context
    """

    name, *values = line.split()
    name = SYNONYMS.get(name, name)
    value = values[0] if values else None

    if value is None:
        logger.warning("line %d: %s without value, skipped", line_no, name)
        return None

    if name == 'FLAG':
        if value not in FLAG_FORMATS:
            logger.warning("line %d: unknown flag format %s, skipped", line_no, value)
            return None
        return (name, value)
    if name in ['SET', 'TRY']:
        return (name, value)
    if name == 'NEEDAFFIX':
        return (name, context.parse_flag(value))

    return None


def read_rule(source: Iterable[Tuple[int, str]], kind: str, *values: str,
              line_no: int = 0, context: Context) -> Optional[aff.Rule]:
    """
    Reads the affix table. We are on its header line, and below are the rows:

    .. code-block:: text

        SFX A Y 2       # we are on this line currently
        SFX A y ies [^aeiou]y
        SFX A 0 s [aeiou]y

    The method reads header values, then fetches as many rows from ``source`` as header declares.
    Lines which are not ``PFX``/``SFX`` between the rows are skipped. If the file ends before
    all the rows are read, :class:`TruncatedAffixBlock <unmunch.errors.TruncatedAffixBlock>` is raised.

    Returns ``None`` (after logging) if the header is malformed.

    Args:
        source: Rows are read from it
        kind: ``PFX`` or ``SFX``
        values: Values already read from the header line
        line_no: Number of the header line
        context: Reading context
    """

    if len(values) < 3:
        logger.warning("line %d: %s header should have flag, cross product and count, got %r",
                       line_no, kind, ' '.join(values))
        return None

    flag, crossproduct, count_str, *_ = values
    try:
        count = int(count_str)
    except ValueError:
        logger.warning("%s: bad count %r at line %d, rule discarded", flag, count_str, line_no)
        return None

    affix_kind = aff.Kind.PREFIX if kind == 'PFX' else aff.Kind.SUFFIX

    rows = []
    if count > 0:
        for num, ln in source:
            name, *fields = ln.split()
            if name not in AFFIX_DIRECTIVES:
                logger.debug("line %d: %s inside %s table, skipped", num, name, flag)
                continue
            rows.append((num, fields))
            if len(rows) == count:
                break

    if len(rows) < count:
        raise TruncatedAffixBlock(flag, count, len(rows), line_no)

    affixes = []
    for num, fields in rows:
        if len(fields) < 3:
            logger.warning("line %d: %s row should have flag, strip and affix, got %r",
                           num, flag, ' '.join(fields))
            continue
        if fields[0] != flag:
            logger.warning("line %d: row flag %s in %s table", num, fields[0], flag)
        affixes.append(make_affix(affix_kind, flag, *fields[1:], context=context))

    return aff.Rule(
        flag=flag,
        kind=affix_kind,
        crossproduct=(crossproduct == 'Y'),
        count=count,
        affixes=tuple(affixes),
        line_no=line_no
    )


def make_affix(kind: aff.Kind, flag: str, strip: str, add: str, *rest: str, context: Context) -> aff.Affix:
    """
    Produces Affix from raw row data: ``strip``, ``add[/flags]``, then optional condition and
    data tags.
    """

    cond = rest[0] if rest else ''
    add, _, flags = add.partition('/')
    # Anything after condition might be data tags, or just a free text
    tags = tuple(tag for tag in rest[1:] if ':' in tag)

    return aff.Affix(
        flag=flag,
        kind=kind,
        strip=('' if strip == '0' else strip),
        add=('' if add == '0' else add),
        condition=cond,
        flags=tuple(context.parse_flags(flags)),
        data=tags
    )


def _looks_like_header(values) -> bool:
    return len(values) >= 3 and values[1] in ('Y', 'N') and values[2].isdigit()
