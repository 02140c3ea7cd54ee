"""
Unit-tests for grawlix.core.vocabulary – base set plus per-request deltas.
"""
import pytest

import grawlix.core.vocabulary as vocabulary_mod
from grawlix.core.config import get_settings
from grawlix.core.vocabulary import Vocabulary, load_wordlist, normalize_term


def test_normalize_term():
    assert normalize_term("  BadWord ") == "badword"
    assert normalize_term("Blow\tJOB") == "blow job"
    assert normalize_term("!!!") == ""
    assert normalize_term(None) == ""


def test_normalize_term_keeps_inner_punctuation():
    assert normalize_term("F*CK") == "f*ck"
    assert normalize_term(" Don't! ") == "don't"
    assert normalize_term("blow,  job") == "blow, job"


def test_contains_is_case_insensitive(vocab):
    assert vocab.contains("BADWORD")
    assert "BadWord" in vocab
    assert not vocab.contains("goodword")
    assert 42 not in vocab


def test_additions_take_effect(vocab):
    extended = vocab.with_additions({"xyzzy"})
    assert extended.contains("xyzzy")
    assert not vocab.contains("xyzzy")      # receiver untouched


def test_exclusions_override_base(vocab):
    reduced = vocab.with_exclusions({"Badword"})
    assert not reduced.contains("badword")
    assert vocab.contains("badword")


@pytest.mark.parametrize("order", ["add-first", "exclude-first"])
def test_exclusion_beats_addition(vocab, order):
    if order == "add-first":
        v = vocab.with_additions({"xyzzy"}).with_exclusions({"xyzzy"})
    else:
        v = vocab.with_exclusions({"xyzzy"}).with_additions({"xyzzy"})
    assert not v.contains("xyzzy")


def test_bare_string_is_one_term(vocab):
    v = vocab.with_additions("abc")
    assert v.contains("abc")
    assert not v.contains("a")
    assert not vocab.with_exclusions("badword").contains("badword")
    assert Vocabulary.from_terms("xyz").effective_terms == {"xyz"}


def test_empty_or_malformed_deltas_are_noops(vocab):
    assert vocab.with_additions(None) is vocab
    assert vocab.with_additions([]) is vocab
    assert vocab.with_exclusions(["", "  ", "?!"]) is vocab


def test_effective_terms_and_len(vocab):
    v = vocab.with_additions(["extra"]).with_exclusions(["heck"])
    assert "extra" in v.effective_terms
    assert "heck" not in v.effective_terms
    assert len(v) == len(vocab)


def test_longest_term_tracks_additions(vocab):
    assert vocab.longest_term == 2
    assert vocab.with_additions(["one two three"]).longest_term == 3
    assert Vocabulary().longest_term == 0


def test_load_wordlist_skips_comments_and_blanks(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("# header\nfoo\n\n  bar  # trailing\nblow job\n", encoding="utf-8")
    assert load_wordlist(p) == ["foo", "bar", "blow job"]


def test_packaged_wordlist_loads():
    terms = load_wordlist(vocabulary_mod.DEFAULT_WORDLIST)
    assert "ass" in terms
    assert all(not t.startswith("#") for t in terms)


@pytest.fixture
def fresh_caches():
    get_settings.cache_clear()
    vocabulary_mod.get_base_vocabulary.cache_clear()
    yield
    get_settings.cache_clear()
    vocabulary_mod.get_base_vocabulary.cache_clear()


def test_base_vocabulary_from_configured_path(tmp_path, monkeypatch, fresh_caches):
    p = tmp_path / "custom.txt"
    p.write_text("frobnicate\n", encoding="utf-8")
    monkeypatch.setenv("WORDLIST_PATH", str(p))

    base = vocabulary_mod.get_base_vocabulary()
    assert base.contains("frobnicate")
    assert not base.contains("ass")
    assert vocabulary_mod.get_base_vocabulary() is base     # shared, not rebuilt
