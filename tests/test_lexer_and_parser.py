import pytest
from hypothesis import given, strategies as st

from sprig.errors import SprigReadError
from sprig.evaluation.evaluator import evaluate
from sprig.printer import render_string
from sprig.reader.parser import lex, parse, parse_program, TokenStream
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.operation import Operation
from sprig.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"two words"', [("string", '"two words"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 2.5)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "2.5"), ("rparen", ")")]),
        ("set! #t", [("symbol", "set!"), ("symbol", "#t")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("#nil", Nil),
        ("#t", True),
        ("#f", False),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("-20.00", -20.0),
        ("1e3", 1000.0),
        ('"hello"', "hello"),
        ('"a \\"quoted\\" word"', 'a "quoted" word'),
        ('"line\\nbreak"', "line\nbreak"),
        ("balance", Symbol("balance")),
        ("nil", Symbol("nil")),
        ("'a", [Operation.QUOTE, Symbol("a")]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected     # Parser yields one expression


def test_integer_literal_is_not_bool():
    assert type(parse("1")[0]) is int
    assert type(parse("#t")[0]) is bool


@pytest.mark.parametrize("word,op", [(op.value, op) for op in Operation])
def test_reserved_words_become_operations(word, op):
    assert parse(word) == [op]


def test_reserved_word_inside_larger_symbol_is_a_symbol():
    assert parse("list-ref set!x") == [Symbol("list-ref"), Symbol("set!x")]


def test_nested_lists():
    source = "(define f (lambda (x) (* x x)))"
    expected = [
        Operation.DEFINE,
        Symbol("f"),
        [Operation.LAMBDA, [Symbol("x")], [Operation.MULTIPLY, Symbol("x"), Symbol("x")]],
    ]
    assert parse(source) == [expected]


def test_parse_many_top_level_forms():
    assert parse("(define a 1) a ; trailing comment") == [
        [Operation.DEFINE, Symbol("a"), 1],
        Symbol("a"),
    ]


def test_parse_program_wraps_forms_in_module():
    assert parse_program("(define a 1) a") == [
        Operation.MODULE,
        [Operation.DEFINE, Symbol("a"), 1],
        Symbol("a"),
    ]


def test_parse_program_evaluates_as_one_module():
    env = Environment()
    program = parse_program("(define sq (lambda (x) (* x x))) (define a 4) (define b (sq a))")
    assert evaluate(program, env) is Nil
    assert env.find(Symbol("b")) == 16
    assert env.depth == 0


def test_parse_program_of_empty_source_evaluates_to_nil():
    assert evaluate(parse_program("; nothing here"), Environment()) is Nil


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty string
        "    ",         # spaces only
        "; comment",    # comment only
        "\n\n",
    ]
)
def test_lexer_edge_cases_yield_nothing(source):
    assert list(lex(source)) == []
    assert parse(source) == []


@pytest.mark.parametrize("source", ["(a b", ")", "(a))", '"unterminated', "'"])
def test_malformed_source_raises_read_error(source):
    with pytest.raises(SprigReadError):
        parse(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
def _reads_as_float(s):
    try:
        float(s)
    except ValueError:
        return False
    return True


symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu"), whitelist_characters="-?!*<>"),
    min_size=1, max_size=10
).filter(lambda s: s not in {op.value for op in Operation} and not _reads_as_float(s))


@given(st.integers(min_value=-(2 ** 127), max_value=2 ** 127 - 1))
def test_integer_literals(n):
    assert parse(str(n)) == [n]


@pytest.mark.parametrize("n", [2 ** 127, -(2 ** 127) - 1, 10 ** 40])
def test_integer_literals_outside_128_bits_read_as_float(n):
    result = parse(str(n))[0]
    assert type(result) is float
    assert result == float(n)


def test_integer_literal_bounds_stay_int():
    assert parse(f"{2 ** 127 - 1} {-(2 ** 127)}") == [2 ** 127 - 1, -(2 ** 127)]


@given(st.floats(allow_infinity=False, allow_nan=False))
def test_float_literals(x):
    result = parse(repr(x))[0]
    assert isinstance(result, float)
    assert result == x


@given(st.text(max_size=30))
def test_string_literals_read_back_from_printer(s):
    assert parse(render_string(s)) == [s]


@given(st.lists(st.one_of(symbol_strat, st.integers(-1000, 1000)), max_size=6))
def test_flat_lists(items):
    source = "(" + " ".join(str(i) for i in items) + ")"
    expected = [Symbol(i) if isinstance(i, str) else i for i in items]
    assert parse(source) == [expected]
