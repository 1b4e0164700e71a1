import pytest

from unmunch.cli import main

from .base import fixture, read_list


def test_output(capsys):
    assert main([fixture('en_sample.aff'), fixture('en_sample.dic')]) == 0

    out, err = capsys.readouterr()
    assert out.splitlines() == read_list('en_sample.words')
    assert 'flag Z not found' not in out


def test_tags(capsys, tmp_path):
    aff = tmp_path / 'tags.aff'
    aff.write_text('SFX A Y 1\nSFX A 0 ed . is:past\n', encoding='utf-8')
    dic = tmp_path / 'tags.dic'
    dic.write_text('1\nwalk/A po:verb\n', encoding='utf-8')

    assert main(['--tags', str(aff), str(dic)]) == 0

    out, _ = capsys.readouterr()
    assert out.splitlines() == ['walk\tpo:verb', 'walked\tpo:verb is:past']


def test_truncated(capsys, tmp_path):
    aff = tmp_path / 'broken.aff'
    aff.write_text('SFX A Y 2\nSFX A 0 s .\n', encoding='utf-8')

    assert main([str(aff), fixture('simple.dic')]) == 1

    out, _ = capsys.readouterr()
    assert out == ''


def test_bad_word_count(tmp_path):
    dic = tmp_path / 'broken.dic'
    dic.write_text('cat/A\n', encoding='utf-8')

    assert main([fixture('simple.aff'), str(dic)]) == 1


def test_missing_file():
    assert main([fixture('nonexistent.aff'), fixture('simple.dic')]) == 1


def test_usage():
    with pytest.raises(SystemExit):
        main([fixture('simple.aff')])
