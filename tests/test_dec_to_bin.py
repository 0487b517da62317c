import io

import pytest

from nodekit.dec_to_bin import decimal_to_binary, main


def test_worked_example():
    assert decimal_to_binary(10) == "1010"


@pytest.mark.parametrize("number", [0, -5])
def test_non_positive_has_no_digits(number):
    assert decimal_to_binary(number) == ""


@pytest.mark.parametrize("number", [1, 3, 6, 77, 1000, 123456])
def test_doubling_appends_zero(number):
    assert decimal_to_binary(2 * number) == decimal_to_binary(number) + "0"


@pytest.mark.parametrize("number", [1, 3, 6, 77, 1000])
def test_doubling_plus_one_appends_one(number):
    assert decimal_to_binary(2 * number + 1) == decimal_to_binary(number) + "1"


@pytest.mark.parametrize("number", [1, 2, 9, 255, 4096])
def test_digits_are_binary_with_leading_one(number):
    bits = decimal_to_binary(number)
    assert bits.startswith("1")
    assert set(bits) <= {"0", "1"}


def test_main_prints_spaced_digits(capsys):
    assert main(["6"]) == 0
    out = capsys.readouterr().out
    assert out == "Binary: 1 1 0 \n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter Decimal Number: Binary: ")
    assert out.endswith(" ".join(decimal_to_binary(5)) + " \n")


def test_main_zero_prints_no_digits(capsys):
    assert main(["0"]) == 0
    assert capsys.readouterr().out == "Binary: \n"


def test_main_rejects_non_number(capsys):
    assert main(["abc"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "abc" in captured.err