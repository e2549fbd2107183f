import pytest

from bagsort.series import main, series_recursive


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1)])
def test_base_cases(n, expected):
    assert series_recursive(n) == expected


def test_first_recursive_term():
    assert series_recursive(3) == 3


def test_sixth_term():
    assert series_recursive(6) == 49


@pytest.mark.parametrize("n", range(3, 40))
def test_recurrence_holds(n):
    assert series_recursive(n) == (
        series_recursive(n - 1)
        + 2 * series_recursive(n - 2)
        + 4 * series_recursive(n - 3)
    )


def test_non_decreasing_from_one():
    values = [series_recursive(n) for n in range(1, 60)]
    assert values == sorted(values)


def test_large_index_is_exact_integer():
    big = series_recursive(500)
    assert big == series_recursive(499) + 2 * series_recursive(498) + 4 * series_recursive(497)


@pytest.mark.parametrize("n", [-1, -5, -100])
def test_negative_index_raises(n):
    with pytest.raises(ValueError):
        series_recursive(n)


def test_main_prints_result(capsys):
    assert main(["3"]) == 0
    assert capsys.readouterr().out == "seriesRecursive(3) = 3\n"


def test_main_base_case(capsys):
    assert main(["2"]) == 0
    assert capsys.readouterr().out == "seriesRecursive(2) = 1\n"


def test_main_non_numeric_reads_as_zero(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "seriesRecursive(0) = 0\n"


def test_main_parses_leading_digits(capsys):
    assert main(["  1xyz"]) == 0
    assert capsys.readouterr().out == "seriesRecursive(1) = 1\n"


@pytest.mark.parametrize("argv", [[], ["1", "2"]])
def test_main_usage_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert captured.out == ""


def test_main_negative_index_fails(capsys):
    assert main(["-4"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "negative" in captured.err