"""
"Unmunching" (Hunspell's term) is a process of turning affix-compressed dictionary into plain list
of all language's words. E.g. for English, in the dictionary we have "spell/JSMDRZG" (stem + flags
declaring what suffixes and prefixes it might have), and we can run:

.. code-block:: text

    unmunch path/to/en_US.aff path/to/en_US.dic

Which will produce, among others:

.. code-block:: text

    spell
    spells
    spell's
    spelled
    speller
    spellers
    spelling
    spellings

Words are printed as soon as they are produced, in dictionary order, and are not deduplicated.
Problems found in files are reported to stderr; the exit status is non-zero only if the files
can't be read at all.
"""

import sys
import logging
import argparse
from typing import List, Optional

from unmunch.dictionary import Dictionary
from unmunch.errors import UnmunchError
from unmunch.algo.expand import DEFAULT_MAX_DEPTH

logger = logging.getLogger('unmunch')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='unmunch',
        description="Produce all word forms from Hunspell's .aff/.dic pair"
    )
    parser.add_argument('aff', metavar='AFF', help="affix rules file")
    parser.add_argument('dic', metavar='DIC', help="dictionary file")
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help="print debug information to stderr")
    parser.add_argument('-t', '--tags', action='store_true', default=False,
                        help="print data tags of each form, tab-separated")
    parser.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH, metavar='N',
                        help=f"max number of affixes applied one after another (default: {DEFAULT_MAX_DEPTH})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    options = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr
    )

    try:
        dictionary = Dictionary.from_files(options.aff, max_depth=options.max_depth)
        for form in dictionary.forms(options.dic):
            if options.tags and form.data:
                print(form.text, ' '.join(form.data), sep='\t')
            else:
                print(form.text)
    except (UnmunchError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0
