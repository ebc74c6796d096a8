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
# Filename: src/hashid_errors.py

"""
Exception types raised by the hash ID codec.

Every error derives from `HashIdError`, which is itself a `ValueError`, so
callers can catch the whole family, a single failure mode, or plain
`ValueError` the way the older id encoder callers already do.
"""


class HashIdError(ValueError):
    """Base class for all codec errors."""


class InvalidAlphabetError(HashIdError):
    """The alphabet is too short, has whitespace or repeats a character."""


class EmptyInputError(HashIdError):
    """encode() was called without any numbers."""

    def __init__(self):
        super().__init__("Encoding an empty list of numbers is not supported.")


class NegativeNumberError(HashIdError):
    """encode() was given a negative number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Negative numbers are not supported: {number}")


class AlphabetMismatchError(HashIdError):
    """A decoded segment holds a character the per-step alphabet lacks."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Alphabet used for hash was different (unexpected character '{character}').")


class RoundTripMismatchError(HashIdError):
    """
    Re-encoding the decoded numbers did not reproduce the input string.

    This is what a wrong salt, a wrong alphabet or a garbled hash looks like.
    The recovered numbers are kept on `partial` for diagnostics only.
    """

    def __init__(self, hashid: str, reencoded: str, partial: list):
        self.hashid = hashid
        self.reencoded = reencoded
        self.partial = partial
        super().__init__(
            f"Mismatch between encode and decode: '{hashid}' re-encoded as "
            f"'{reencoded}'. Result: {partial}"
        )

# === End of src/hashid_errors.py ===
