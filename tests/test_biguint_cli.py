import io

import pytest

import biguint_cli
from biguint import DivisionByZeroError, InvalidDigitError, UnderflowError

@pytest.mark.parametrize('lhs, op, rhs, expected', [
    ('100', '+', '100', '200'),
    ('100', '-', '99', '1'),
    ('999', '*', '999', '998001'),
    ('100', '/', '9', '11'),
    ('100', '%', '9', '1'),
    ('7', '==', '0007', 'true'),
    ('7', '!=', '7', 'false'),
    ('1', '<', '2', 'true'),
    ('1', '>', '2', 'false'),
    ('2', '<=', '2', 'true'),
    ('1', '>=', '2', 'false'),
])
def test_evaluate(lhs, op, rhs, expected):
    assert biguint_cli.evaluate(lhs, op, rhs) == expected

def test_evaluate_with_remainder():
    assert biguint_cli.evaluate('100', '/', '9', remainder=True) == '11 1'
    # only / is affected
    assert biguint_cli.evaluate('100', '+', '9', remainder=True) == '109'

def test_evaluate_errors():
    with pytest.raises(UnderflowError):
        biguint_cli.evaluate('5', '-', '10')
    with pytest.raises(DivisionByZeroError):
        biguint_cli.evaluate('5', '/', '0')
    with pytest.raises(InvalidDigitError):
        biguint_cli.evaluate('5x', '+', '1')
    with pytest.raises(ValueError, match=r"unknown operator '\^'"):
        biguint_cli.evaluate('5', '^', '1')

def test_split_expression():
    assert biguint_cli.split_expression('100 + 100\n') == ['100', '+', '100']
    assert biguint_cli.split_expression('100 +') is None
    assert biguint_cli.split_expression('') is None

def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('100 + 100\n'))
    assert biguint_cli.main([]) == 0
    assert capsys.readouterr().out == '200\n'

def test_main_arguments(capsys):
    assert biguint_cli.main(['999', '*', '999']) == 0
    assert capsys.readouterr().out == '998001\n'

def test_main_single_argument_expression(capsys):
    assert biguint_cli.main(['100 - 99']) == 0
    assert capsys.readouterr().out == '1\n'

def test_main_remainder_flag(capsys):
    assert biguint_cli.main(['100', '/', '9', '--remainder']) == 0
    assert capsys.readouterr().out == '11 1\n'

@pytest.mark.parametrize('argv, message', [
    (['5', '-', '10'], 'error: result would be negative'),
    (['5', '/', '0'], 'error: division by zero'),
    (['12a', '+', '1'], "error: invalid digit 'a' at position 2"),
])
def test_main_core_errors_exit_1(capsys, argv, message):
    assert biguint_cli.main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert message in captured.err

@pytest.mark.parametrize('argv', [
    ['1', '+'],
    ['1', '^', '2'],
    ['1 + 2 + 3'],
])
def test_main_malformed_expression_exits_2(argv):
    with pytest.raises(SystemExit) as excinfo:
        biguint_cli.main(argv)
    assert excinfo.value.code == 2

def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(biguint_cli.LOG_LEVEL_ENV, 'DEBUG')
    args = biguint_cli.build_parser().parse_args(['1', '+', '1'])
    assert args.log_level == 'DEBUG'

def test_unknown_log_level_falls_back(capsys):
    assert biguint_cli.main(['1', '+', '1', '--log-level', 'CHATTY']) == 0
    assert capsys.readouterr().out == '2\n'
