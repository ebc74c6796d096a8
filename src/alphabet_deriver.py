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
# Filename: src/alphabet_deriver.py

"""
Splits a user alphabet into the three disjoint character roles used by the
engine: the working alphabet (numeral digits), the separators (between
numbers) and the guards (around the payload when padding).

The derivation runs once per engine and is a pure function of the alphabet
and the salt:

1.  Separator candidates (`SEPARATOR_CANDIDATES`) found in the alphabet are
    reserved as separators, in candidate order, and removed from the
    working alphabet.
2.  The separators are shuffled with the salt.
3.  If there are no separators, or more than `SEPARATOR_RATIO` alphabet
    characters per separator, the separator list is resized to
    ceil(len(alphabet) / SEPARATOR_RATIO) (at least 2), borrowing leading
    alphabet characters or truncating as needed.
4.  The working alphabet is shuffled with the salt.
5.  ceil(len(alphabet) / GUARD_RATIO) guards are taken from the front of the
    working alphabet, or from the separators when fewer than 3 alphabet
    characters remain.
"""

import logging
import math
from typing import NamedTuple, Tuple

from consistent_shuffle import consistent_shuffle
from hashid_errors import InvalidAlphabetError

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
SEPARATOR_CANDIDATES = "cfhistuCFHISTU"
MIN_ALPHABET_LENGTH = 16
SEPARATOR_RATIO = 3.5
GUARD_RATIO = 12.0

logger = logging.getLogger(__name__)


class DerivedAlphabet(NamedTuple):
    """The three disjoint character sets, each as an immutable tuple."""
    alphabet: Tuple[str, ...]
    separators: Tuple[str, ...]
    guards: Tuple[str, ...]


def validate_alphabet(alphabet: str):
    """Raises InvalidAlphabetError if `alphabet` cannot be used."""
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabetError(f"Alphabet must contain at least {MIN_ALPHABET_LENGTH} characters.")
    if any(ch.isspace() for ch in alphabet):
        raise InvalidAlphabetError("Alphabet may not contain whitespace.")

    seen = set()
    for ch in alphabet:
        if ch in seen:
            raise InvalidAlphabetError(f"Duplicate character in alphabet: {ch}")
        seen.add(ch)


def derive(alphabet: str, salt: str) -> DerivedAlphabet:
    """
    Builds the working alphabet, separators and guards for an engine.

    Args:
        alphabet (str): The user alphabet (validated here).
        salt (str): The engine salt; may be empty.

    Returns:
        DerivedAlphabet: Disjoint sets whose sizes add up to len(alphabet).

    Raises:
        InvalidAlphabetError: On a bad alphabet or if any derived set is empty.
    """
    validate_alphabet(alphabet)

    separators = [ch for ch in SEPARATOR_CANDIDATES if ch in alphabet]
    working = [ch for ch in alphabet if ch not in separators]

    separators = consistent_shuffle(separators, salt)

    if not separators or len(working) / len(separators) > SEPARATOR_RATIO:
        target = math.ceil(len(working) / SEPARATOR_RATIO)
        if target == 1:
            target = 2
        if target > len(separators):
            diff = target - len(separators)
            separators.extend(working[:diff])
            working = working[diff:]
        else:
            separators = separators[:target]

    working = consistent_shuffle(working, salt)

    guard_count = math.ceil(len(working) / GUARD_RATIO)
    if len(working) < 3:
        guards = separators[:guard_count]
        separators = separators[guard_count:]
    else:
        guards = working[:guard_count]
        working = working[guard_count:]

    if not (working and separators and guards):
        raise InvalidAlphabetError(
            f"Alphabet '{alphabet}' is too small to derive digits, separators and guards."
        )

    logger.debug(f"Derived {len(working)} alphabet characters, {len(separators)} separators "
                 f"and {len(guards)} guards from a {len(alphabet)}-character alphabet.")
    return DerivedAlphabet(tuple(working), tuple(separators), tuple(guards))

# === End of src/alphabet_deriver.py ===
