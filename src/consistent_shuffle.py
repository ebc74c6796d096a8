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
# Filename: src/consistent_shuffle.py

"""
Salt-driven permutation helpers shared by the alphabet deriver, the encoder
and the decoder.

`consistent_shuffle()` is a Fisher-Yates walk whose swap index comes from the
salt's code points instead of a random source, so the same salt always yields
the same permutation. Encoding and decoding replay it step for step; any
difference between the two sides shows up as a failed decode.
"""

from typing import List, Sequence


def consistent_shuffle(chars: Sequence[str], salt: Sequence[str]) -> List[str]:
    """
    Returns a new list holding `chars` permuted by `salt`.

    The input is never modified. An empty salt returns an unshuffled copy.

    Args:
        chars: The characters to permute.
        salt: The characters driving the swap indices. Any sequence of
              single characters works (a str or a list).

    Returns:
        list: The permuted characters.
    """
    result = list(chars)
    if not salt:
        return result

    salt_len = len(salt)
    v = 0
    p = 0
    for i in range(len(result) - 1, 0, -1):
        code = ord(salt[v])
        p += code
        j = (code + v + p) % i
        result[i], result[j] = result[j], result[i]
        v = (v + 1) % salt_len
    return result


def split_on(text: str, delimiters: Sequence[str]) -> List[str]:
    """
    Splits `text` at every occurrence of any delimiter character.

    Adjacent delimiters produce empty segments, and a string with N delimiter
    occurrences always yields N + 1 segments.
    """
    if not delimiters:
        return [text]
    marker = delimiters[0]
    table = str.maketrans({ch: marker for ch in delimiters})
    return text.translate(table).split(marker)

# === End of src/consistent_shuffle.py ===
