import logging

import pytest

import bb_show


def test_report(capsys):
    assert bb_show.main(['0RB1RB_0LA---']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ['Machine definition: 0RB1RB_0LA---', 'BB(2)', 'To write: 0']
    assert out[-2:] == ['To state: 18446744073709551615', '']


def test_filename_is_echoed_first(capsys):
    assert bb_show.main(['1RB', '--filename', 'machines.txt']) == 0
    assert capsys.readouterr().out.splitlines()[:2] == ['machines.txt', 'Machine definition: 1RB']


def test_short_filename_option(capsys):
    assert bb_show.main(['-f', 'x', '1RB_1LA']) == 0
    assert capsys.readouterr().out.startswith('x\nMachine definition: 1RB_1LA\nBB(2, 1)\n')


def test_empty_machine_prints_nothing(capsys):
    assert bb_show.main(['']) == 0
    assert capsys.readouterr().out == ''


def test_bad_machine(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert bb_show.main(['0XB']) == 1
    assert 'invalid direction' in caplog.text
    assert 'BB(' not in capsys.readouterr().out


def test_machine_is_required(capsys):
    with pytest.raises(SystemExit) as info:
        bb_show.main([])
    assert info.value.code == 2


def test_no_other_flags(capsys):
    with pytest.raises(SystemExit):
        bb_show.main(['1RB', '--verbose'])
