"""
Shared fixtures. Env-vars are stubbed **before** anything imports
grawlix.core.config, so Settings() sees test values.
"""
import os

os.environ["TESTING"] = "1"
os.environ.pop("WORDLIST_PATH", None)
os.environ.pop("MASK_CHAR", None)
os.environ.pop("PLACEHOLDER_CONTENT", None)

import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from grawlix.core.vocabulary import Vocabulary


@pytest.fixture
def vocab() -> Vocabulary:
    return Vocabulary.from_terms(["badword", "ass", "blow", "blow job", "heck"])
