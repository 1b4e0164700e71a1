"""
The "what words can be produced from this stem?" algorithm implementation, also known in
Hunspell's world as "unmunching".

On a bird-eye view level:

* the stem itself is a word, unless it is marked with ``NEEDAFFIX`` flag
* each flag of the stem designates a prefix or suffix rule; each affix of the rule which condition
  matches the stem produces a new form
* the new form might have flags of its own (``SFX A 0 ed/B .``), so it is expanded the same way,
  recursively

For example, with

.. code-block:: text

    # .aff
    SFX A Y 1
    SFX A 0 ed/B .

    SFX B Y 1
    SFX B 0 ly .

    # .dic
    1
    walk/A

the forms are ``walk``, ``walked``, ``walkedly``.

Forms are produced lazily and in order, nothing is deduplicated: if two rules produce the same
string, it would be yielded twice.

.. autoclass:: Expander

.. autoclass:: Form
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from unmunch import data
from unmunch.readers.aff import Context
from unmunch.readers.dic import parse_line

logger = logging.getLogger(__name__)

#: How many affixes could be applied one after another. Real dictionaries use two at most,
#: the limit is only here to stop rules referring to each other in a loop.
DEFAULT_MAX_DEPTH = 8


@dataclass
class Form:
    """
    One produced word form, with data tags (from dictionary entry, and from all affixes applied
    to produce it).
    """

    text: str
    data: Tuple[str, ...] = ()

    def __str__(self):
        return self.text


class Expander:
    """
    ``Expander`` object is created on :class:`Dictionary <unmunch.dictionary.Dictionary>` reading.
    Typically, you would not use it directly, but you might want for experiments::

        >>> dictionary = Dictionary.from_files('dictionaries/en_US.aff')
        >>> expander = dictionary.expander

        >>> [*expander('spell/JSMDRZG')]
        ['spell', 'spells', "spell's", 'spelled', 'speller', 'spellers', 'spelling', 'spellings']

    Note that the rules of the dictionary are never changed after they are read, so one ``Expander``
    can be shared (even between threads).

    **Main methods**

    .. automethod:: __call__
    .. automethod:: forms
    .. automethod:: apply_rule
    """

    def __init__(self, aff: data.aff.Aff, context: Context, *, max_depth: int = DEFAULT_MAX_DEPTH):
        self.aff = aff
        self.context = context
        self.max_depth = max_depth

    def __call__(self, word: Union[str, data.dic.Word]) -> Iterator[str]:
        """
        Produces all forms of the word, as strings.

        Args:
            word: Either :class:`Word <unmunch.data.dic.Word>` read from dictionary, or a dictionary
                  line (``"cat/AB"``)
        """
        for form in self.forms(word):
            yield form.text

    def forms(self, word: Union[str, data.dic.Word], *,
              tags: Tuple[str, ...] = (),
              depth: int = 0) -> Iterator[Form]:
        """
        Produces all forms of the word: the word itself (unless it has ``NEEDAFFIX`` flag), and
        then everything that its flags produce, in the order of flags.

        Args:
            word: Stem with flags (or a string to parse into one)
            tags: Data tags of affixes that were applied to produce this word
            depth: How many affixes were applied to produce this word
        """

        if isinstance(word, str):
            word = parse_line(word, context=self.context)

        if depth == 0:
            tags = tuple(f'{tag}:{value}' for tag, values in word.data.items() for value in values) + tags

        needaffix = self.context.needaffix

        if not (needaffix and needaffix in word.flags):
            yield Form(word.stem, tags)

        if not word.flags:
            return

        if depth >= self.max_depth:
            logger.warning("%s: %d affixes applied already, flags %s ignored",
                           word.stem, depth, ''.join(word.flags))
            return

        for flag in word.flags:
            if flag == needaffix:
                continue
            yield from self.apply_rule(word.stem, flag, tags=tags, depth=depth, line_no=word.line_no)

    def apply_rule(self, stem: str, flag: str, *,
                   tags: Tuple[str, ...] = (),
                   depth: int = 0,
                   line_no: int = 0) -> Iterator[Form]:
        """
        Applies all affixes of the rule designated by ``flag`` to the stem, and expands the resulting
        forms further.

        Affixes are checked in order they are declared. The one without condition (``.``) applies
        always, and stops the processing of the rest.

        If there is no such rule, it is logged (with the dictionary line the stem came from, if known)
        and nothing is produced.
        """

        rule = self.aff.rules.get(flag)
        if rule is None:
            if line_no:
                logger.warning("line %d: %s: flag %s not found", line_no, stem, flag)
            else:
                logger.warning("%s: flag %s not found", stem, flag)
            return

        for affix in rule.affixes:
            if not affix.match(stem):
                continue

            text = affix.apply(stem)
            if text is None:
                # Stem doesn't have what should be stripped at its edge: not a match, even for the affix
                # without condition, so it doesn't stop the rule and the next affixes are still tried
                continue

            derived = data.dic.Word(stem=text, flags=affix.flags, line_no=line_no)
            yield from self.forms(derived, tags=tags + affix.data, depth=depth + 1)

            if affix.always:
                break
