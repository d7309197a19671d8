"""
Property Tests for the ROT18 transform
Covers involution, length preservation, passthrough and the boundary table.
"""

import string

import pytest
from hypothesis import given, strategies as st

from rot18 import rot18, rot13, rot5

ALPHANUMERIC = set(string.ascii_letters + string.digits)

# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

ascii_text = st.text(alphabet=st.characters(min_codepoint=0, max_codepoint=0x7F))
non_alphanumeric = st.characters().filter(lambda c: c not in ALPHANUMERIC)

# =============================================================================
# PROPERTIES
# =============================================================================

@given(st.text())
def test_involution(text):
    assert rot18(rot18(text)) == text


@given(ascii_text)
def test_involution_ascii(text):
    assert rot18(rot18(text)) == text


@given(st.text())
def test_length_preserved(text):
    assert len(rot18(text)) == len(text)


@given(st.text(alphabet=non_alphanumeric))
def test_non_alphanumeric_passthrough(text):
    assert rot18(text) == text


@given(st.text())
def test_halves_compose(text):
    assert rot18(text) == rot13(rot5(text)) == rot5(rot13(text))


@given(st.text())
def test_halves_are_involutions(text):
    assert rot13(rot13(text)) == text
    assert rot5(rot5(text)) == text


def test_every_alphanumeric_changes():
    # Fixed points would break the midpoint swap
    for char in ALPHANUMERIC:
        assert rot18(char) != char
        assert rot18(char) in ALPHANUMERIC

# =============================================================================
# BOUNDARIES
# =============================================================================

@pytest.mark.parametrize("source, expected", [
    ("A", "N"), ("M", "Z"), ("N", "A"), ("Z", "M"),
    ("a", "n"), ("m", "z"), ("n", "a"), ("z", "m"),
    ("0", "5"), ("4", "9"), ("5", "0"), ("9", "4"),
])
def test_boundary_mapping(source, expected):
    assert rot18(source) == expected


@pytest.mark.parametrize("char", ["@", "[", "`", "{", "/", ":"])
def test_ascii_neighbours_untouched(char):
    # Characters adjacent to A-Z, a-z and 0-9 in the ASCII table
    assert rot18(char) == char


@pytest.mark.parametrize("char", ["é", "ß", "Ω", "٣", "１", "🙂"])
def test_non_ascii_passthrough(char):
    # Unicode letters and digits are not ASCII alphanumerics
    assert rot18(char) == char

# =============================================================================
# SCENARIOS
# =============================================================================

@pytest.mark.parametrize("source, expected", [
    ("Have a nice day!", "Unir n avpr qnl!"),
    ("Unir n avpr qnl!", "Have a nice day!"),
    ("0816", "5361"),
    ("", ""),
    ("XYZ xyz", "KLM klm"),
])
def test_scenarios(source, expected):
    assert rot18(source) == expected


def test_rot13_leaves_digits():
    assert rot13("Room 101") == "Ebbz 101"


def test_rot5_leaves_letters():
    assert rot5("Room 101") == "Room 656"
