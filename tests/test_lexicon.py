import pytest

from wordle_solve.lexicon import default_path, load_lexicon
from wordle_solve.words import Word


def test_bundled_word_list(bundled):
    assert bundled.source == default_path(5)
    assert bundled.word_length == 5
    assert len(bundled.words) == 2309
    assert Word("favor") in bundled.words
    assert Word("arose") in bundled.words
    vocab = bundled.vocabulary()
    assert list(vocab) == sorted(vocab)


def test_load_filters_and_deduplicates(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Hello\nworld\nhello\nab\nfoo-bar\n  Crane \n\n", encoding="utf-8")
    lex = load_lexicon(path, word_length=5)
    assert lex.vocabulary() == ("hello", "world", "crane")


def test_load_other_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nbat\ncrane\n", encoding="utf-8")
    lex = load_lexicon(str(path), word_length=3)
    assert lex.vocabulary() == ("cat", "bat")
    assert lex.words.word_length == 3


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "missing.txt")
    path = tmp_path / "short.txt"
    path.write_text("cat\ndog\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon(path, word_length=5)
