import io

import pytest

from coursekit.polylist import (
    BoundedList,
    ListOverflowError,
    ListUnderflowError,
    main,
)


def _make(values, capacity=100):
    result = BoundedList(capacity)
    for position, value in enumerate(values, 1):
        result.insert(position, value)
    return result


def test_insert_in_order():
    assert list(_make([4, 5, 6])) == [4, 5, 6]


def test_insert_clamps_low_and_high():
    values = _make([1, 2])
    values.insert(0, 9)
    values.insert(50, 8)
    assert list(values) == [9, 1, 2, 8]


def test_insert_middle():
    values = _make([1, 2, 3])
    values.insert(2, 7)
    assert list(values) == [1, 7, 2, 3]


def test_overflow():
    values = _make([1, 2], capacity=2)
    with pytest.raises(ListOverflowError):
        values.insert(1, 3)
    assert len(values) == 2


def test_underflow():
    with pytest.raises(ListUnderflowError):
        BoundedList().delete(1)


@pytest.mark.parametrize("position", [0, 4])
def test_delete_out_of_range(position):
    values = _make([1, 2, 3])
    with pytest.raises(IndexError):
        values.delete(position)
    assert list(values) == [1, 2, 3]


def test_delete_returns_value():
    values = _make([1, 2, 3])
    assert values.delete(2) == 2
    assert list(values) == [1, 3]


def test_format_pairs():
    assert _make([5, 7]).format() == "5 07 1"


def test_evaluate_invariants():
    values = _make([3, 4, 5])
    assert values.evaluate(0) == 3
    assert values.evaluate(1) == 12


def test_evaluate_known():
    assert _make([1, 2, 3]).evaluate(2) == 17


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out.splitlines()


def test_main_without_edits(monkeypatch, capsys):
    code, lines = _run(monkeypatch, capsys, "2 1 1 2 0\n")
    assert code == 0
    assert lines[0] == _make([1, 2]).format()
    assert lines[-1] == str(_make([1, 2]).evaluate(2))


def test_main_with_edit(monkeypatch, capsys):
    code, lines = _run(monkeypatch, capsys, "2 1 1 2 1 1 5 0\n")
    expected = _make([5, 2])
    assert lines[1] == expected.format()
    assert lines[-1] == str(expected.evaluate(2))


def test_main_truncated_input(monkeypatch, capsys):
    code, _ = _run(monkeypatch, capsys, "2 3 1\n")
    assert code == 1