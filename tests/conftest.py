"""Pytest bootstrap for local source imports.

Makes ``import termsurvey`` resolve to the checkout and lets test modules
import the shared ``prompt_fakes`` helpers regardless of import mode.
"""

from __future__ import annotations

import sys
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent

for path in (str(TESTS_DIR.parent), str(TESTS_DIR)):
    if path not in sys.path:
        sys.path.insert(0, path)
