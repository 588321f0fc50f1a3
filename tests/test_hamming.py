import io

import pytest

from coursekit.hamming import check_bit_count, hamming_encode, is_check_position, main


def _syndrome(code):
    result = 0
    for position, char in enumerate(code, 1):
        if char == "1":
            result ^= position
    return result


def _data_bits(code, r):
    return "".join(
        char for position, char in enumerate(code, 1) if not is_check_position(position, r)
    )


@pytest.mark.parametrize("k", range(1, 27))
def test_check_bit_count_is_minimal(k):
    r = check_bit_count(k)
    assert 2**r >= k + r + 1
    assert r == 2 or 2 ** (r - 1) < k + r


def test_check_positions():
    assert [p for p in range(1, 9) if is_check_position(p, 3)] == [1, 2, 4]


def test_known_word():
    assert hamming_encode("1011") == "0110011"


@pytest.mark.parametrize("bits", ["1", "01", "1011", "110010", "10101010101", "1" * 26])
def test_encode_invariants(bits):
    r = check_bit_count(len(bits))
    code = hamming_encode(bits)
    assert len(code) == len(bits) + r
    assert _data_bits(code, r) == bits
    assert _syndrome(code) == 0


@pytest.mark.parametrize("flip", range(1, 12))
def test_single_error_located(flip):
    code = hamming_encode("1100101")
    corrupted = "".join(
        ("1" if c == "0" else "0") if i == flip else c for i, c in enumerate(code, 1)
    )
    assert _syndrome(corrupted) == flip


@pytest.mark.parametrize("bits", ["", "102", "1" * 27])
def test_encode_rejects(bits):
    with pytest.raises(ValueError):
        hamming_encode(bits)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1011\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == hamming_encode("1011")


def test_main_truncates(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1" * 30 + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == hamming_encode("1" * 26)


def test_main_empty(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1