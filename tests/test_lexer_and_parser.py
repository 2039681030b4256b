import pytest
from hypothesis import given, strategies as st

from mal.core import read
from mal.printer import pr_str
from mal.reader.parser import TokenStream
from mal.reader.tokenizer import lex, tokenize
from mal.types.errors import (
    MalNoMoreTokens,
    MalQuoteError,
    MalReaderError,
    MalUnbalancedArray,
    MalUnbalancedList,
    MalUnbalancedMap,
)
from mal.types.keyword import Keyword
from mal.types.nil import Nil
from mal.types.reader_macro import ReaderMacro
from mal.types.sequence import Array, List, Map
from mal.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(+ 1 2 "Hello")', [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "2"),
                             ("string", '"Hello"'), ("rparen", ")")]),
        ("~@a", [("tilde_at", "~@"), ("atom", "a")]),
        ("'a", [("atom", "'"), ("atom", "a")]),
        ("`(a ~b)", [("atom", "`"), ("lparen", "("), ("atom", "a"), ("atom", "~"),
                     ("atom", "b"), ("rparen", ")")]),
        ("^m x", [("atom", "^"), ("atom", "m"), ("atom", "x")]),
        ("[1 {:a 2}]", [("lbracket", "["), ("atom", "1"), ("lbrace", "{"), ("atom", ":a"),
                        ("atom", "2"), ("rbrace", "}"), ("rbracket", "]")]),
        ("a, b ; c\n d", [("atom", "a"), ("atom", "b"), ("comment", "; c"), ("atom", "d")]),
        ('"abc \\" dfg"', [("string", '"abc \\" dfg"')]),
        ("  ,, ", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_tokenize_unterminated_string():
    with pytest.raises(MalQuoteError):
        tokenize('("Hello')


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("true", True),
        ("false", False),
        (":kw", Keyword(":kw")),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", Symbol("9223372036854775808")),
        ('"Hello World"', '"Hello World"'),
        ('"abc \\" dfg"', '"abc \\" dfg"'),
        ("(+)", List.of(Symbol("+"))),
        ("(+ 1 2)", List.of(Symbol("+"), 1, 2)),
        ("(+ (+) 1)", List.of(Symbol("+"), List.of(Symbol("+")), 1)),
        ("(+ :test)", List.of(Symbol("+"), Keyword(":test"))),
        ("(+ nil true false)", List.of(Symbol("+"), Nil, True, False)),
        ('("Hello World")', List.of('"Hello World"')),
        ("()", List()),
        ("[1 2 (+ 1 2)]", Array.of(1, 2, List.of(Symbol("+"), 1, 2))),
        ('{"a" 1 :b 2}', Map.of('"a"', 1, Keyword(":b"), 2)),
        ("'a", List.of(ReaderMacro.QUOTE, Symbol("a"))),
        ("`a", List.of(ReaderMacro.QUASIQUOTE, Symbol("a"))),
        ("~a", List.of(ReaderMacro.UNQUOTE, Symbol("a"))),
        ("~@(1 2)", List.of(ReaderMacro.SPLICE_UNQUOTE, List.of(1, 2))),
        ("@a", List.of(ReaderMacro.DEREF, Symbol("a"))),
        ("'(1 'b)", List.of(ReaderMacro.QUOTE, List.of(1, List.of(ReaderMacro.QUOTE, Symbol("b"))))),
        ('^{"a" 1} [1 2 3]', List.of(ReaderMacro.WITH_META, Array.of(1, 2, 3), Map.of('"a"', 1))),
        ("(1 ; comment\n 2)", List.of(1, 2)),
        ("(1 2 ; trailing comment\n)", List.of(1, 2)),
        ("; leading\n42", 42),
        ("(+ 1 2) (ignored", List.of(Symbol("+"), 1, 2)),
    ],
)
def test_read(source, expected):
    result = read(source)
    assert type(result) is type(expected)
    assert result == expected


@pytest.mark.parametrize(
    "source, error",
    [
        ("(1 2", MalUnbalancedList),
        ("(1 (2 3)", MalUnbalancedList),
        ("[1 2", MalUnbalancedArray),
        ("{1 2", MalUnbalancedMap),
        (")", MalUnbalancedList),
        ("]", MalUnbalancedArray),
        ("}", MalUnbalancedMap),
        ("(1 2]", MalUnbalancedArray),
        ('"\\"', MalQuoteError),
        ('"abc\\', MalQuoteError),
        ('("Hello', MalQuoteError),
        ("", MalNoMoreTokens),
        ("; only a comment", MalNoMoreTokens),
        ("'", MalNoMoreTokens),
    ],
)
def test_read_errors(source, error):
    with pytest.raises(error):
        read(source)


def test_reader_errors_share_a_base():
    for error in (MalUnbalancedList, MalUnbalancedArray, MalUnbalancedMap, MalNoMoreTokens):
        assert issubclass(error, MalReaderError)
    assert issubclass(MalQuoteError, MalReaderError)


def test_bad_input_does_not_affect_next_read():
    with pytest.raises(MalUnbalancedList):
        read("(1 2")
    assert read("(3 4)") == List.of(3, 4)


def test_parse_all_reads_every_form():
    stream = TokenStream(tokenize("1 (a) ; c\n [b]"))
    assert list(stream.parse_all()) == [1, List.of(Symbol("a")), Array.of(Symbol("b"))]


def test_error_messages():
    with pytest.raises(MalUnbalancedList, match="EOF while parsing List"):
        read("(")
    with pytest.raises(MalUnbalancedArray, match="EOF while parsing Array"):
        read("[")
    with pytest.raises(MalUnbalancedMap, match="EOF while parsing Map"):
        read("{")


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-z][a-z0-9\-!?*<>=]{0,10}", fullmatch=True).filter(
    lambda s: s not in ("nil", "true", "false")
)

int64_strat = st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)

string_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu", "Nd", "Zs")), max_size=20
).map(lambda s: f'"{s}"')


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(int64_strat)
def test_integer_reads_and_prints_back(n):
    assert read(str(n)) == n
    assert pr_str(read(str(n))) == str(n)


@given(symbol_strat)
def test_symbol_reads_and_prints_back(name):
    assert read(name) == Symbol(name)
    assert pr_str(read(name)) == name


@given(st.lists(st.one_of(symbol_strat, int64_strat.map(str), string_strat), max_size=6))
def test_list_source_reads_and_prints_back(parts):
    source = "(" + " ".join(parts) + ")"
    assert pr_str(read(source)) == source
