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
# Filename: tests/conftest.py

import sys
import os

import pytest

# Add the 'src' directory to the Python path so that the modules can be
# imported directly by the tests and tracked by coverage.py.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)

from hashid_engine import HashIdEngine  # noqa: E402

GOLDEN_SALT = "this is my salt"
GOLDEN_NUMBERS = [45, 434, 1313, 99]


@pytest.fixture
def golden_engine():
    """Default alphabet, the reference salt and no minimum length."""
    return HashIdEngine(salt=GOLDEN_SALT)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolates a test from any real config.ini, .env or HASHIDS_SALT."""
    # setenv first so that a value loaded from .env during the test is undone.
    monkeypatch.setenv("HASHIDS_SALT", "")
    monkeypatch.delenv("HASHIDS_SALT")
    monkeypatch.setenv("HASHID_CONFIG_OVERRIDE", str(tmp_path / "config.ini"))
    return tmp_path

# === End of tests/conftest.py ===
