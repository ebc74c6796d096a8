#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Salted Hash ID Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_numeral_codec.py

"""
Unit tests for src/numeral_codec.py.
"""
import pytest

from hashid_errors import AlphabetMismatchError
from numeral_codec import decode_numeral, encode_numeral

BASE58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
DECIMAL_CHARS = "0123456789"

# Test cases: (integer, base58_string)
ENCODING_TEST_CASES = [
    (0, "1"),
    (57, "z"),
    (58, "21"),
    (255, "5Q"),
    (9999, "3yQ"),
    (123456789, "BukQL"),
]


@pytest.mark.parametrize("num, expected_str", ENCODING_TEST_CASES)
def test_encode_numeral_base58(num, expected_str):
    """Test encoding of various integers over the Base58 alphabet."""
    assert encode_numeral(num, BASE58_CHARS) == expected_str


@pytest.mark.parametrize("expected_num, encoded_str", ENCODING_TEST_CASES)
def test_decode_numeral_base58(expected_num, encoded_str):
    """Test decoding of various Base58 strings to integers."""
    assert decode_numeral(encoded_str, BASE58_CHARS) == expected_num


@pytest.mark.parametrize("num, expected_str", [(0, "0"), (7, "7"), (10, "10"), (90210, "90210")])
def test_decimal_alphabet_matches_str(num, expected_str):
    """A plain digit alphabet behaves like ordinary decimal notation."""
    assert encode_numeral(num, DECIMAL_CHARS) == expected_str
    assert decode_numeral(expected_str, list(DECIMAL_CHARS)) == num


def test_shuffled_alphabet_changes_the_digits():
    """The alphabet order, not the characters, determines each digit's value."""
    reversed_digits = DECIMAL_CHARS[::-1]
    assert encode_numeral(123, reversed_digits) == "876"
    assert decode_numeral("876", reversed_digits) == 123


@pytest.mark.parametrize("invalid_input", [-1, -100, 1.5, "abc", True])
def test_encode_numeral_invalid_input_raises_error(invalid_input):
    """Test that encode_numeral raises ValueError for invalid inputs."""
    with pytest.raises(ValueError, match="Input must be a non-negative integer."):
        encode_numeral(invalid_input, BASE58_CHARS)


@pytest.mark.parametrize("invalid_char_str", ["0", "O", "I", "l", "21iY2e+"])
def test_decode_numeral_invalid_chars_raises_error(invalid_char_str):
    """Characters outside the alphabet are reported as an alphabet mismatch."""
    with pytest.raises(AlphabetMismatchError):
        decode_numeral(invalid_char_str, BASE58_CHARS)


def test_alphabet_mismatch_is_a_value_error():
    with pytest.raises(ValueError) as excinfo:
        decode_numeral("1O", BASE58_CHARS)
    assert excinfo.value.character == "O"


def test_decode_empty_string_is_zero():
    assert decode_numeral("", BASE58_CHARS) == 0


@pytest.mark.parametrize("num", [0, 1, 58, 1000, 9876543210, 2**64 - 1, 10**40])
def test_round_trip_conversion(num):
    """Test that encoding and then decoding a number returns the original number."""
    encoded = encode_numeral(num, BASE58_CHARS)
    assert decode_numeral(encoded, BASE58_CHARS) == num

# === End of tests/test_numeral_codec.py ===
