import pytest

from hillcracker.classical.common import parse_four_ints, parse_key_matrix
from hillcracker.classical.polygraphic.codec import (
    block_view,
    digit_to_letter,
    letter_to_digit,
    string_view,
    text_to_digits,
)
from hillcracker.core.errors import InvalidCiphertextError
from hillcracker.core.matrix import KeyMatrix, RowVector


def test_letter_digit_mapping():
    assert letter_to_digit("A") == 0
    assert letter_to_digit("Z") == 25
    assert digit_to_letter(7) == "H"
    assert text_to_digits("HELP") == [7, 4, 11, 15]


def test_block_view():
    assert block_view("HELP") == [RowVector([7, 4]), RowVector([11, 15])]


@pytest.mark.parametrize("s", ["", "AB", "HELPME", "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOGZ"])
def test_string_view_inverts_block_view(s):
    assert string_view(block_view(s)) == s


def test_block_view_rejects_odd_length():
    with pytest.raises(InvalidCiphertextError):
        block_view("ABC")


@pytest.mark.parametrize("s", ["ab", "A1", "A "])
def test_block_view_rejects_non_letters(s):
    with pytest.raises(InvalidCiphertextError):
        block_view(s)


def test_digit_out_of_range():
    with pytest.raises(InvalidCiphertextError):
        digit_to_letter(26)


@pytest.mark.parametrize("raw", ["3,3,2,5", "3 3 2 5", "3,3;2,5", "[3, 3; 2, 5]"])
def test_parse_four_ints(raw):
    assert parse_four_ints(raw) == (3, 3, 2, 5)


def test_parse_key_matrix_reduces():
    assert parse_key_matrix("29,-1,2,5") == KeyMatrix(3, 25, 2, 5)


@pytest.mark.parametrize("raw", ["1,2,3", "a,b,c,d", ""])
def test_parse_four_ints_rejects(raw):
    with pytest.raises(ValueError):
        parse_four_ints(raw)
