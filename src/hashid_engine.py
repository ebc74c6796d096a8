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
# Filename: src/hashid_engine.py

"""
Salt-keyed hash ID engine: turns lists of non-negative integers into short,
shuffled, URL-safe strings and back.

This module provides the `HashIdEngine` class. Construction derives the
working alphabet, separators and guards once; after that the engine holds
only immutable tuples, so a single instance can be shared freely between
threads. Every call to `encode()` or `decode()` works on its own copy of the
alphabet, which it re-shuffles once per number.

Encoded layout:

    [padding] [guard] lottery numeral (separator numeral)* [guard] [padding]

The lottery character is picked from a checksum of all numbers and seeds
every per-number shuffle. Guards and padding only appear when the natural
length is below `min_length`.

`decode()` replays the same shuffles and then re-encodes what it recovered.
If that does not reproduce the input exactly, the input was made with a
different salt or alphabet, or it was tampered with, and a
`RoundTripMismatchError` is raised.

Usage:
    from hashid_engine import HashIdEngine

    engine = HashIdEngine(salt="this is my salt")
    hashid = engine.encode([45, 434, 1313, 99])   # '7nnhzEsDkiYa'
    numbers = engine.decode(hashid)               # [45, 434, 1313, 99]
"""

import logging
from typing import Iterable, List

from alphabet_deriver import DEFAULT_ALPHABET, derive
from consistent_shuffle import consistent_shuffle, split_on
from hashid_errors import (
    EmptyInputError,
    NegativeNumberError,
    RoundTripMismatchError,
)
from numeral_codec import decode_numeral, encode_numeral

logger = logging.getLogger(__name__)


class HashIdEngine:
    """Encodes and decodes hash IDs for one (alphabet, salt, min_length)."""

    def __init__(self, alphabet: str = DEFAULT_ALPHABET, salt: str = "", min_length: int = 0):
        if not isinstance(min_length, int) or min_length < 0:
            raise ValueError("min_length must be a non-negative integer.")

        derived = derive(alphabet, salt)
        self._alphabet = derived.alphabet
        self._separators = derived.separators
        self._guards = derived.guards
        self._salt = salt
        self._min_length = min_length

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def separators(self):
        return self._separators

    @property
    def guards(self):
        return self._guards

    @property
    def salt(self):
        return self._salt

    @property
    def min_length(self):
        return self._min_length

    def __repr__(self):
        return (f"HashIdEngine(alphabet={''.join(self._alphabet)!r}, "
                f"separators={''.join(self._separators)!r}, "
                f"guards={''.join(self._guards)!r}, min_length={self._min_length})")

    def _reshuffle(self, alphabet: List[str], lottery: str) -> List[str]:
        """Performs the per-number alphabet shuffle shared by encode and decode."""
        seed = (lottery + self._salt + "".join(alphabet))[:len(alphabet)]
        return consistent_shuffle(alphabet, seed)

    def encode(self, numbers: Iterable[int]) -> str:
        """
        Encodes a sequence of non-negative integers into a hash ID.

        Args:
            numbers: The integers to encode, in order.

        Returns:
            str: A hash ID of at least `min_length` characters.

        Raises:
            EmptyInputError: If `numbers` is empty.
            NegativeNumberError: If any number is negative.
            TypeError: If any element is not an integer.
        """
        numbers = list(numbers)
        if not numbers:
            raise EmptyInputError()
        for number in numbers:
            if not isinstance(number, int) or isinstance(number, bool):
                raise TypeError(f"Only integers can be encoded, got {type(number).__name__}.")
            if number < 0:
                raise NegativeNumberError(number)

        alphabet = list(self._alphabet)
        numbers_hash = sum(number % (i + 100) for i, number in enumerate(numbers))

        lottery = alphabet[numbers_hash % len(alphabet)]
        result = [lottery]

        last = len(numbers) - 1
        for i, number in enumerate(numbers):
            alphabet = self._reshuffle(alphabet, lottery)
            numeral = encode_numeral(number, alphabet)
            result.extend(numeral)

            if i < last:
                number %= ord(numeral[0]) + i
                result.append(self._separators[number % len(self._separators)])

        if len(result) < self._min_length:
            guard_index = (numbers_hash + ord(result[0])) % len(self._guards)
            result.insert(0, self._guards[guard_index])

            if len(result) < self._min_length:
                guard_index = (numbers_hash + ord(result[2])) % len(self._guards)
                result.append(self._guards[guard_index])

        half_length = len(alphabet) // 2
        while len(result) < self._min_length:
            alphabet = consistent_shuffle(alphabet, list(alphabet))
            result = alphabet[half_length:] + result + alphabet[:half_length]

            excess = len(result) - self._min_length
            if excess > 0:
                start = excess // 2
                result = result[start:start + self._min_length]

        return "".join(result)

    def decode(self, hashid: str) -> List[int]:
        """
        Decodes a hash ID back into its list of integers.

        An empty string decodes to an empty list. Any other input must
        re-encode to exactly itself, otherwise the decode is rejected.

        Args:
            hashid (str): A string produced by `encode()`.

        Returns:
            list[int]: The original numbers.

        Raises:
            AlphabetMismatchError: If a segment holds a character outside
                its reconstructed alphabet.
            RoundTripMismatchError: If the recovered numbers do not
                re-encode to `hashid`. The numbers are on `.partial`.
        """
        if not hashid:
            return []

        parts = split_on(hashid, self._guards)
        payload = parts[1] if len(parts) in (2, 3) else hashid

        numbers = []
        if payload:
            lottery = payload[0]
            alphabet = list(self._alphabet)
            for segment in split_on(payload[1:], self._separators):
                alphabet = self._reshuffle(alphabet, lottery)
                numbers.append(decode_numeral(segment, alphabet))

        reencoded = self.encode(numbers) if numbers else ""
        if reencoded != hashid:
            logger.debug(f"Rejected hash ID '{hashid}': recovered {numbers}, which re-encodes as '{reencoded}'.")
            raise RoundTripMismatchError(hashid, reencoded, numbers)

        return numbers

# === End of src/hashid_engine.py ===
