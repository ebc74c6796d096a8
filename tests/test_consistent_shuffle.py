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
# Filename: tests/test_consistent_shuffle.py

"""
Unit tests for src/consistent_shuffle.py.
"""
import pytest

from consistent_shuffle import consistent_shuffle, split_on


def test_empty_salt_returns_unshuffled_copy():
    chars = list("abcdef")
    result = consistent_shuffle(chars, "")
    assert result == chars
    assert result is not chars


@pytest.mark.parametrize("chars, salt, expected", [
    ("abc", "a", "bca"),
    ("abcd", "ab", "bdac"),
    ("a", "anything", "a"),
    ("", "salt", ""),
])
def test_known_permutations(chars, salt, expected):
    """Hand-computed swaps for small inputs."""
    assert "".join(consistent_shuffle(chars, salt)) == expected


def test_input_is_not_modified():
    chars = list("abcdefghijklmnop")
    snapshot = list(chars)
    consistent_shuffle(chars, "this is my salt")
    assert chars == snapshot


def test_result_is_a_permutation():
    chars = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
    result = consistent_shuffle(chars, "this is my salt")
    assert sorted(result) == sorted(chars)
    assert "".join(result) != chars


def test_is_deterministic():
    chars = "abcdefghijklmnopqrstuvwxyz"
    assert consistent_shuffle(chars, "pepper") == consistent_shuffle(chars, "pepper")


def test_different_salts_give_different_orders():
    chars = "abcdefghijklmnopqrstuvwxyz"
    assert consistent_shuffle(chars, "pepper") != consistent_shuffle(chars, "paprika")


def test_salt_may_be_a_list_of_characters():
    chars = "abcdefghijklmnopqrstuvwxyz"
    assert consistent_shuffle(chars, list("pepper")) == consistent_shuffle(chars, "pepper")


@pytest.mark.parametrize("text, delimiters, expected", [
    ("a-b_c", "-_", ["a", "b", "c"]),
    ("abc", "-_", ["abc"]),
    ("--", "-", ["", "", ""]),
    ("-abc_", ("-", "_"), ["", "abc", ""]),
    ("", "-", [""]),
    ("a-b", "", ["a-b"]),
])
def test_split_on(text, delimiters, expected):
    assert split_on(text, delimiters) == expected

# === End of tests/test_consistent_shuffle.py ===
