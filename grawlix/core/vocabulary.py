# grawlix/core/vocabulary.py
"""
Disallowed-term vocabulary.

The base vocabulary is built once per process and shared by every request.
Requests never touch it directly; they derive a view with
``with_additions`` / ``with_exclusions`` which hands back a new frozen
instance that points at the same base set.

Membership:  (term in base or term in added) and term not in removed
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from grawlix.core.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = Path(__file__).resolve().parents[1] / "data" / "wordlist.txt"

# A "word" is a run of word characters; matches always start and end on one.
WORD_RE = re.compile(r"\w+")
_EDGE_RE = re.compile(r"^\W+|\W+$")


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def normalize_term(term: Optional[str]) -> str:
    """
    Case-fold a term, collapse whitespace runs to one space and trim
    non-word edges. Inner punctuation is kept: "f*ck" stays "f*ck".
    Returns '' when the term has no word characters.
    """
    if not term:
        return ""
    return _EDGE_RE.sub("", collapse_whitespace(term.casefold()))


def _normalize_all(terms: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not terms:
        return frozenset()
    if isinstance(terms, str):
        terms = [terms]
    return frozenset(t for t in map(normalize_term, terms) if t)


def _word_count(terms: Iterable[str]) -> int:
    return max((len(WORD_RE.findall(t)) for t in terms), default=0)


@dataclass(frozen=True)
class Vocabulary:
    base: FrozenSet[str] = frozenset()
    added: FrozenSet[str] = frozenset()
    removed: FrozenSet[str] = frozenset()
    # word count of the longest base/added term, bounds the phrase scan
    longest_term: int = field(default=0, compare=False)

    @classmethod
    def from_terms(cls, terms: Iterable[str]) -> "Vocabulary":
        base = _normalize_all(terms)
        return cls(base=base, longest_term=_word_count(base))

    # ───────────────────────── membership ─────────────────────────
    def contains(self, term: str) -> bool:
        return self.contains_normalized(normalize_term(term))

    def contains_normalized(self, term: str) -> bool:
        """Lookup for a term that has already been through normalize_term."""
        if not term or term in self.removed:
            return False
        return term in self.base or term in self.added

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.contains(term)

    def __len__(self) -> int:
        return len(self.effective_terms)

    @property
    def effective_terms(self) -> FrozenSet[str]:
        return (self.base | self.added) - self.removed

    # ─────────────────────── derived views ────────────────────────
    def with_additions(self, terms: Optional[Iterable[str]]) -> "Vocabulary":
        extra = _normalize_all(terms)
        if not extra:
            return self
        return replace(
            self,
            added=self.added | extra,
            longest_term=max(self.longest_term, _word_count(extra)),
        )

    def with_exclusions(self, terms: Optional[Iterable[str]]) -> "Vocabulary":
        excluded = _normalize_all(terms)
        if not excluded:
            return self
        return replace(self, removed=self.removed | excluded)


def load_wordlist(path: Path) -> list[str]:
    """Read one term per line; blank lines and '#' comments are skipped."""
    terms = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.split("#", 1)[0].strip()
            if line:
                terms.append(line)
    return terms


@lru_cache
def get_base_vocabulary() -> Vocabulary:
    """
    Process-wide base vocabulary, loaded from WORDLIST_PATH or the packaged
    default list on first use.
    """
    path = get_settings().wordlist_path or DEFAULT_WORDLIST
    vocabulary = Vocabulary.from_terms(load_wordlist(path))
    logger.info("Loaded %d disallowed terms from %s", len(vocabulary.base), path)
    return vocabulary
