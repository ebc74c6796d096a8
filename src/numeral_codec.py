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
# Filename: src/numeral_codec.py

"""
Positional numeral conversion over an arbitrary alphabet.

An alphabet of R distinct characters is treated as the digit set of a base-R
numeral system, most significant digit first. The engine calls these with a
freshly shuffled alphabet for every number it encodes, so the same integer
spells differently at each position of a hash ID.

This module is not intended to be run directly but is imported by the engine.
"""

from typing import Sequence

from hashid_errors import AlphabetMismatchError


def encode_numeral(num: int, alphabet: Sequence[str]) -> str:
    """Encodes a non-negative integer using `alphabet` as its digits."""
    if not isinstance(num, int) or isinstance(num, bool) or num < 0:
        raise ValueError("Input must be a non-negative integer.")
    base = len(alphabet)
    if num == 0:
        return alphabet[0]

    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def decode_numeral(encoded_str: str, alphabet: Sequence[str]) -> int:
    """
    Decodes a numeral string back into an integer.

    Raises:
        AlphabetMismatchError: If a character is not part of `alphabet`.
    """
    base = len(alphabet)
    lookup = {char: index for index, char in enumerate(alphabet)}
    num = 0
    for char in encoded_str:
        try:
            num = num * base + lookup[char]
        except KeyError:
            raise AlphabetMismatchError(char) from None
    return num

# === End of src/numeral_codec.py ===
