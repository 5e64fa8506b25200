import io
import math

import pytest

from ilmachine.logic_tasks import (
    function_values,
    log_series,
    main,
    piecewise,
    quiz_score,
    smallest,
    truth_table,
)


def test_truth_table_has_eight_rows_in_binary_order():
    rows = truth_table()
    assert [row[:3] for row in rows] == [
        (n >> 2 & 1, n >> 1 & 1, n & 1) for n in range(8)
    ]


def test_truth_table_false_rows():
    false_rows = {row[:3] for row in truth_table() if row[3] == 0}
    assert false_rows == {(0, 1, 0), (0, 1, 1)}


@pytest.mark.parametrize(
    "args,expected",
    [((3, 1, 2), 1), ((1, 2, 3), 1), ((5, 5, 2), 2), ((4, 4, 4), 4), ((-7, 0, -8), -8)],
)
def test_smallest(args, expected):
    assert smallest(*args) == expected


def test_smallest_is_order_independent():
    assert smallest(9, -3, 4) == smallest(4, 9, -3) == smallest(-3, 4, 9)


def test_piecewise_first_branch_at_zero():
    assert piecewise(0.0, 0.0, 0.0, 0.0) == -4.5


def test_piecewise_sqrt_of_negative_is_nan():
    result = piecewise(3.0, 0.5, 4.5, 100.0)
    assert str(result) == "nan"


def test_piecewise_log_of_negative_is_nan():
    result = piecewise(10.0, 0.5, 4.5, -1.0)
    assert str(result) == "nan"


def test_function_values_uses_fixed_parameters():
    values = function_values(0.0)
    assert len(values) == 3
    assert values[0] == piecewise(0.0, 0.5, 4.5, 1.0)
    assert values[2] == piecewise(0.0, 0.5, 2.7, 1.0)


def test_function_values_survives_overflow():
    values = function_values(1000.0)
    assert len(values) == 3


def test_quiz_scores():
    assert quiz_score(2) == 2
    assert quiz_score(1) == 0
    assert quiz_score(3) == 0


@pytest.mark.parametrize("answer", [0, 4, -1])
def test_quiz_rejects_unknown(answer):
    with pytest.raises(ValueError):
        quiz_score(answer)


def test_log_series_empty_and_first_term():
    assert log_series(0.3, 0) == 0
    assert log_series(0.3, 1) == 0.3


def test_log_series_converges_to_log():
    assert math.isclose(log_series(0.5, 80), math.log1p(0.5), rel_tol=1e-12)


def test_main_runs_all_tasks(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 2\n0.5\n7 2\n0.5 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    for title in ("Task1", "Task2", "Task3", "Task4", "Task5"):
        assert title in out
    assert "Task2\n1\n" in out
    assert "Введите корректный номер варианта ответа" in out
    assert "Score = 2" in out


def test_main_do_while_runs_once_for_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3 0 2 0.25 0"))
    main([])
    out = capsys.readouterr().out
    assert "Цикл с предусловием = 0.000000" in out
    assert "Цикл с постусловием = 0.250000" in out