from typing import List, NamedTuple

from grawlix.core.vocabulary import WORD_RE, Vocabulary, collapse_whitespace

MASK_CHAR = "*"


class Match(NamedTuple):
    start: int
    end: int
    term: str


def find_matches(text: str, vocabulary: Vocabulary) -> List[Match]:
    """
    Locate every whole-word occurrence of an effective vocabulary term.

    Text is split into ``\\w+`` tokens. At each token the longest span of
    up to ``vocabulary.longest_term`` tokens is tried first, compared as
    case-folded text with whitespace runs collapsed, so the separators
    between words must match the term's own ("f*ck" needs the "*", "blow
    job" accepts any whitespace). A hit consumes its tokens and scanning
    resumes after it. Substrings inside a larger word never match, so
    "class" is safe from "ass".
    """
    tokens = list(WORD_RE.finditer(text))
    if not tokens or not vocabulary.longest_term:
        return []

    matches: List[Match] = []
    i = 0
    while i < len(tokens):
        reach = min(vocabulary.longest_term, len(tokens) - i)
        start = tokens[i].start()

        for n in range(reach, 0, -1):
            end = tokens[i + n - 1].end()
            phrase = collapse_whitespace(text[start:end].casefold())
            if vocabulary.contains_normalized(phrase):
                matches.append(Match(start, end, phrase))
                i += n
                break
        else:
            i += 1
    return matches


def contains_profanity(text: str, vocabulary: Vocabulary) -> bool:
    return bool(find_matches(text, vocabulary))


def _substitute(text: str, matches: List[Match], repl) -> str:
    if not matches:
        return text
    parts = []
    last = 0
    for m in matches:
        parts.append(text[last:m.start])
        parts.append(repl(text[m.start:m.end]))
        last = m.end
    parts.append(text[last:])
    return "".join(parts)


def censor(text: str, vocabulary: Vocabulary, mask_char: str = MASK_CHAR) -> str:
    """Mask each matched span with one ``mask_char`` per character."""
    return _substitute(text, find_matches(text, vocabulary), lambda span: mask_char * len(span))


def replace(text: str, vocabulary: Vocabulary, grawlix: str) -> str:
    """Swap each matched span for one literal copy of ``grawlix``."""
    return _substitute(text, find_matches(text, vocabulary), lambda _span: grawlix)
