import re
import logging
from collections import defaultdict

from typing import Dict, Iterator, List, Optional

from unmunch.data import dic
from unmunch.errors import BadWordCount

from unmunch.readers.file_reader import BaseReader
from unmunch.readers.aff import Context

logger = logging.getLogger(__name__)

COUNT_REGEXP = re.compile(r'^\d+(\s+|$)')   # should start with digits, but can have whatever further
SPACES_REGEXP = re.compile(r"\s+")
SLASH_REGEXP = re.compile(r'(?<!\\)/')
TAG_REGEXP = re.compile(r'[ \t]\w{2}:')


def read_dic(source: BaseReader, *, context: Context) -> Iterator[dic.Word]:
    """
    Reads source lazily, producing :class:`Word <unmunch.data.dic.Word>` per line.

    The first line should be the number of words. It isn't checked against the real number of
    entries (mismatch is just logged), but if it is not a number at all, the file is considered
    broken and :class:`BadWordCount <unmunch.errors.BadWordCount>` is raised.

    Args:
        source: "Reader" (thin wrapper around opened file, targeting line-by-line reading)
        context: Context created while reading .aff file and defining common reading settings
    """

    header = next(source, None)
    if header is None:
        raise BadWordCount('')

    _, line = header
    if not COUNT_REGEXP.match(line):
        raise BadWordCount(line)

    declared = int(line.split()[0])
    logger.debug("%d words declared", declared)

    total = 0
    for num, line in source:
        total += 1
        yield parse_line(line, context=context, line_no=num)

    if total != declared:
        logger.info("%d words declared, %d read", declared, total)


def parse_line(line: str, *, context: Context, line_no: int = 0) -> dic.Word:
    """
    Parse one line of the dictionary: ``<stem>/<flags> <data tags>``.

    Args:
        line: Line to parse
        context: Defines format of flags
        line_no: Just stored in the word, for diagnostics
    """

    # Stem can have spaces, so the indication of "here the data tags start" is:
    # * either space character, followed by text in format "xy:something" (exactly two-letter tag, colon, data)
    # * or _tab_ (and exactly tab) character, and then some data

    tags_match = TAG_REGEXP.search(line)
    tags_start: Optional[int] = None
    if tags_match:
        tags_start = tags_match.start()

    old_tags_start = line.find("\t")
    if old_tags_start != -1 and (not tags_start or tags_start > old_tags_start):
        tags_start = old_tags_start

    if tags_start:
        word = line[:tags_start]
        data = parse_data(line[tags_start:])
    else:
        word = line
        data = {}

    # Now, the "word" part is "stem/flags". Flags are optional, and to complicate matters further:
    #
    # * if the word STARTS with "/" -- it is not empty stem + flags, but "word starting with /";
    # * if the "/" should be in stem, it can be screened by "\/"
    if word.startswith('/'):
        flags = ''
    else:
        word_with_flags = SLASH_REGEXP.split(word, 1)
        if len(word_with_flags) == 2:
            word, flags = word_with_flags
        else:
            flags = ''

    if r'\/' in word:
        word = word.replace(r'\/', '/')

    return dic.Word(
        stem=word,
        flags=tuple(context.parse_flags(flags)),
        data=data,
        line_no=line_no
    )


def parse_data(text: str) -> Dict[str, List[str]]:
    """
    Parse data tags after stem. Only tags in format ``"xy:<something>"`` are kept, the rest is
    dropped. Note that one tag can have several values:

    .. code-block:: text

        witch ph:wich ph:whith
    """
    data: Dict[str, List[str]] = defaultdict(list)

    for tag_str in SPACES_REGEXP.split(text):
        if ':' in tag_str:
            tag, _, content = tag_str.partition(':')
            if content:
                data[tag].append(content)

    return dict(data)
