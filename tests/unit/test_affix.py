import logging

from unmunch.data.aff import Affix, Aff, Kind, Rule


def suffix(strip, add, condition='.', **kwarg):
    return Affix(flag='S', kind=Kind.SUFFIX, strip=strip, add=add, condition=condition, **kwarg)


def prefix(strip, add, condition='.', **kwarg):
    return Affix(flag='P', kind=Kind.PREFIX, strip=strip, add=add, condition=condition, **kwarg)


def test_always():
    assert suffix('', 's').always
    assert suffix('', 's', condition='').always
    assert not suffix('', 's', condition='[^y]').always


def test_suffix_condition():
    affix = suffix('y', 'ies', '[^aeiou]y')

    assert affix.match('kitty')
    assert not affix.match('decoy')
    assert not affix.match('cat')
    # Condition is anchored at the end only
    assert affix.match('yy')


def test_prefix_condition():
    affix = prefix('', 'un', '[^u]')

    assert affix.match('do')
    assert not affix.match('undo')


def test_dash_in_condition():
    assert suffix('', 's', 'a-b').match('xa-b')
    assert not suffix('', 's', 'a-b').match('ab')


def test_range_in_condition():
    assert suffix('', 's', '[a-z]').match('cat')
    assert not suffix('', 's', '[a-z]').match('cat-')
    assert not suffix('', 's', '[a-z]').match('CAT')
    assert prefix('', 'un', '[a-f]-').match('b-side')
    assert not prefix('', 'un', '[a-f]-').match('bside')
    assert not prefix('', 'un', '[a-f]-').match('x-ray')


def test_apply_suffix():
    assert suffix('', 's').apply('cat') == 'cats'
    assert suffix('y', 'ies', 'y').apply('kitty') == 'kitties'
    assert suffix('e', '', 'e').apply('rage') == 'rag'
    # Nothing to strip
    assert suffix('y', 'ies').apply('cat') is None


def test_apply_prefix():
    assert prefix('', 're').apply('do') == 'redo'
    assert prefix('a', 'o', 'a').apply('abc') == 'obc'
    assert prefix('x', 'o').apply('abc') is None


def test_bad_condition(caplog):
    with caplog.at_level(logging.WARNING):
        affix = suffix('', 's', '[abc')

    assert affix.always
    assert affix.apply('cat') == 'cats'
    assert 'bad condition' in caplog.text


def test_repr():
    assert repr(suffix('y', 'ies', 'y', flags=('B',))) == 'Suffix(ies: S/B, on [y]y$)'
    assert repr(prefix('', 're')) == 'Prefix(re: P, on ^[.])'


def test_aff_is_read_only():
    rule = Rule(flag='S', kind=Kind.SUFFIX, crossproduct=True, count=1, affixes=(suffix('', 's'),))
    rules = {'S': rule}
    aff = Aff(rules=rules)

    rules['X'] = rule
    assert 'X' not in aff.rules
    assert aff.rules['S'] == rule
