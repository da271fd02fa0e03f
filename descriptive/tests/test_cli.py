import io
import sys
from pathlib import Path
import pytest

from descriptive.cli import DescribeParams, describe, main


def test_should_describe_samples_from_files(tmp_path: Path,
                                            capsys: pytest.CaptureFixture):

    # given
    first = tmp_path / 'first.txt'
    first.write_text('2 4 4 4\n', encoding='utf-8')
    second = tmp_path / 'second.txt'
    second.write_text('5 5\n7\n9\n', encoding='utf-8')

    # when
    status = main([
        '--inputs',
        str(first),
        str(second), '--dtype', 'int64', '--float-format', '.3f'
    ])

    # then
    assert status == 0
    assert capsys.readouterr().out == '8\t2\t5.000\t9\t2.000\n'


def test_should_read_stdin_when_no_inputs(monkeypatch: pytest.MonkeyPatch,
                                          capsys: pytest.CaptureFixture):

    # given
    monkeypatch.setattr(sys, 'stdin', io.StringIO('3\n1\n'))

    # when
    status = describe(
        DescribeParams(dtype='int64', header=True, median=True,
                       delimiter=','))

    # then
    assert status == 0
    assert capsys.readouterr().out == (
        'count,min,mean,max,standard_deviation,median\n'
        '2,1,2.0,3,1.0,2.0\n')


def test_should_print_empty_line_for_no_samples(
        monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):

    # given
    monkeypatch.setattr(sys, 'stdin', io.StringIO('# nothing here\n'))

    # when
    status = describe(DescribeParams())

    # then
    assert status == 0
    assert capsys.readouterr().out == '0\t\t\t\t\n'


def test_should_apply_formatter_config_file(tmp_path: Path,
                                            capsys: pytest.CaptureFixture):

    # given
    samples = tmp_path / 'samples.txt'
    samples.write_text('1.5\n2.5\n', encoding='utf-8')
    formatter_config = tmp_path / 'formatter.yaml'
    formatter_config.write_text("delimiter: '|'\nfloat_format: '.1f'\n",
                                encoding='utf-8')

    # when
    status = describe(
        DescribeParams(inputs=[samples], formatter_config=formatter_config))

    # then
    assert status == 0
    assert capsys.readouterr().out == '2|1.5|2.0|2.5|0.5\n'


def test_should_fail_on_invalid_sample(tmp_path: Path,
                                       capsys: pytest.CaptureFixture):

    # given
    samples = tmp_path / 'samples.txt'
    samples.write_text('1\n2\nabc\n', encoding='utf-8')

    # when
    status = describe(DescribeParams(inputs=[samples]))

    # then
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ''
    assert 'abc' in captured.err


def test_should_fail_on_missing_input_file(tmp_path: Path,
                                           capsys: pytest.CaptureFixture):

    # given
    first = tmp_path / 'first.txt'
    first.write_text('1\n2\n', encoding='utf-8')
    missing = tmp_path / 'missing.txt'

    # when
    status = main(['--inputs', str(first), str(missing)])

    # then
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ''
    assert 'missing.txt' in captured.err


def test_should_fail_on_unknown_dtype(capsys: pytest.CaptureFixture):

    # when
    status = describe(DescribeParams(dtype='no_such_dtype'))

    # then
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ''
    assert 'no_such_dtype' in captured.err


def test_should_fail_on_non_numeric_dtype(capsys: pytest.CaptureFixture):

    # when
    status = describe(DescribeParams(dtype='U3'))

    # then
    captured = capsys.readouterr()
    assert status == 1
    assert 'unsupported sample dtype' in captured.err


def test_should_fail_on_empty_delimiter(capsys: pytest.CaptureFixture):

    # when
    status = describe(DescribeParams(delimiter=''))

    # then
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ''
    assert 'delimiter must not be empty' in captured.err
