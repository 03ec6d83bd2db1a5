import pytest

from lspword.utils.words import WORD_PATTERN, tokenize


def test_empty_text():
    """Empty text has no words."""
    assert tokenize("") == set()


@pytest.mark.parametrize("text", ["   \n\t", "{}();,.-+*/", "// @#$% !!", "1 2 3 42"])
def test_no_words(text):
    """Whitespace, punctuation and bare numbers produce no words."""
    assert tokenize(text) == set()


def test_case_sensitive():
    assert tokenize("Foo foo") == {"Foo", "foo"}


def test_deduplicates():
    assert tokenize("let a_b = a_b + a_b;") == {"let", "a_b"}


def test_single_characters_are_not_words():
    """A lone letter or underscore is not emitted."""
    assert tokenize("a b _ x = y") == set()


def test_leading_digits_are_skipped():
    assert tokenize("x1 42 9lives") == {"x1", "lives"}


def test_underscore_prefix():
    assert tokenize("__init__ _private") == {"__init__", "_private"}


def test_non_ascii_breaks_words():
    """Non-ASCII characters neither start nor extend a word."""
    assert tokenize("caféine naïve ab") == {"caf", "ine", "na", "ve", "ab"}


def test_words_span_lines():
    text = "fn main() {\n    let test = 1;\n}\n"
    assert tokenize(text) == {"fn", "main", "let", "test"}


@pytest.mark.parametrize(
    "text",
    [
        "fn main() { let test = 1; }",
        "let x1 = 42; // @#$%",
        "def f(a, bb, c_3): return bb*2 + _q9",
        "Ünïcödé wörds and_ascii ones",
    ],
)
def test_tokenize_is_idempotent(text):
    """Tokenizing the joined words gives back the same words."""
    words = tokenize(text)
    assert tokenize(" ".join(words)) == words


@pytest.mark.parametrize(
    "text",
    ["a1 b22 _c ___ 9z zz9", "x.y.zz ab-cd ef_gh;ij", "été summer"],
)
def test_word_shape(text):
    """Every word is two or more ASCII word characters, not digit-led."""
    for word in tokenize(text):
        assert len(word) >= 2
        assert word[0].isascii() and (word[0].isalpha() or word[0] == "_")
        assert WORD_PATTERN.fullmatch(word)
