import pytest
from hypothesis import given, strategies as st

from biglisp.errors import (
    InvalidOperator,
    MalformedBindings,
    NestingTooDeep,
    UnbalancedDelimiter,
    UnexpectedToken,
)
from biglisp.reader.parser import lex, parse, parse_all
from biglisp.types.expression import Bindings, Form, Literal, Symbol, VectorLiteral


def _kinds(source):
    return [(t.kind, t.value) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("[1 -2]", [("lbracket", "["), ("symbol", "1"), ("symbol", "-2"), ("rbracket", "]")]),
        ('"hello world"', [("string", '"hello world"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1 2) ; trailing", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "2"), ("rparen", ")")]),
        ('(str"a"b)', [("lparen", "("), ("symbol", "str"), ("string", '"a"'), ("symbol", "b"), ("rparen", ")")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert _kinds(source) == expected


def test_lexer_positions():
    tokens = list(lex("(+ 10\n  x)"))
    assert [t.pos for t in tokens] == [0, 1, 3, 8, 9]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Literal(123)),
        ("-45", Literal(-45)),
        ("3.14", Literal(3.14)),
        ("-2.5", Literal(-2.5)),
        ("1.", Literal(1.0)),
        (".5", Literal(0.5)),
        ('"hello"', Literal("hello")),
        ('""', Literal("")),
        ("true", Literal(True)),
        ("false", Literal(False)),
        ("foo", Symbol("foo")),
        ("-", Symbol("-")),
        ("1.2.3", Symbol("1.2.3")),
        ("with-vars", Symbol("with-vars")),
        ("(- 5)", Form(Symbol("-"), (Literal(5),))),
        ("(+ 1 2)", Form(Symbol("+"), (Literal(1), Literal(2)))),
        ("(do)", Form(Symbol("do"), ())),
        ("[]", VectorLiteral(())),
        ("[1 [2] (f x)]", VectorLiteral((
            Literal(1),
            VectorLiteral((Literal(2),)),
            Form(Symbol("f"), (Symbol("x"),)),
        ))),
        ("; leading\n(+ 1 2) ; trailing", Form(Symbol("+"), (Literal(1), Literal(2)))),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_literal_kinds_are_preserved():
    assert isinstance(parse("7").value, int)
    assert isinstance(parse("7.0").value, float)
    assert parse("true").value is True


def test_literal_equality_includes_kind():
    assert parse("1") != parse("true")
    assert parse("0") != parse("false")
    assert parse("1") != parse("1.0")
    assert parse("(+ 1 2)") == parse("(+  1 2)")
    assert len({parse("1"), parse("true"), parse("1.0"), parse("1")}) == 3


def test_string_escapes():
    assert parse('"a\\"b\\n"').value == 'a"b\n'
    assert parse('"tab\\there"').value == "tab\there"
    assert parse('"back\\\\slash"').value == "back\\slash"
    # Unknown escapes are kept as written.
    assert parse('"a\\qb"').value == "a\\qb"


def test_let_bindings_are_paired():
    form = parse("(let [a 1 b (+ a 1)] b)")
    assert form.op == Symbol("let")
    bindings = form.args[0]
    assert isinstance(bindings, Bindings)
    assert bindings.pairs == (
        (Symbol("a"), Literal(1)),
        (Symbol("b"), Form(Symbol("+"), (Symbol("a"), Literal(1)))),
    )
    assert form.args[1:] == (Symbol("b"),)


def test_empty_let_bindings():
    assert parse("(let [] 1)").args[0] == Bindings(())


def test_nested_forms():
    source = "(if (> 5 3) \"yes\" \"no\")"
    assert parse(source) == Form(
        Symbol("if"),
        (Form(Symbol(">"), (Literal(5), Literal(3))), Literal("yes"), Literal("no")),
    )


def test_parse_all_reads_every_expression():
    exprs = parse_all("(defn f [x] x) ; define\n(call f 1) 42")
    assert len(exprs) == 3
    assert exprs[2] == Literal(42)
    assert parse_all("  ; only a comment") == []


def test_str_round_trips_through_the_reader():
    source = '(let [a [1 "x" true]] (if (> a 2.5) (str a) (- 5)))'
    assert parse(str(parse(source))) == parse(source)


@pytest.mark.parametrize(
    "source, error",
    [
        ("(+ 1 2", UnbalancedDelimiter),
        ("(+ 1 (* 2 3)", UnbalancedDelimiter),
        (")", UnbalancedDelimiter),
        ("]", UnbalancedDelimiter),
        ("(+ 1 2))", UnbalancedDelimiter),
        ("(+ 1 2]", UnbalancedDelimiter),
        ("[1 2)", UnbalancedDelimiter),
        ("[1 2", UnbalancedDelimiter),
        ('"abc', UnbalancedDelimiter),
        ('(str "abc)', UnbalancedDelimiter),
        ("(1 2)", InvalidOperator),
        ('("f" 1)', InvalidOperator),
        ("(true 1)", InvalidOperator),
        ("([1] 2)", InvalidOperator),
        ("((f) 1)", InvalidOperator),
        ("(let [a] a)", MalformedBindings),
        ("(let [a 1 b] a)", MalformedBindings),
        ("(let [1 2] 3)", MalformedBindings),
        ("(let a a)", MalformedBindings),
        ("(let)", MalformedBindings),
        ("()", UnexpectedToken),
        ("", UnexpectedToken),
        ("   ; nothing", UnexpectedToken),
        ("1 2", UnexpectedToken),
    ]
)
def test_parse_errors(source, error):
    with pytest.raises(error):
        parse(source)


def test_parse_error_reports_position():
    with pytest.raises(UnbalancedDelimiter) as exc_info:
        parse("(+ 1\n  ))")
    err = exc_info.value
    assert (err.position, err.line, err.column) == (8, 2, 4)
    assert err.token == ")"


def test_unclosed_form_reports_its_opener():
    with pytest.raises(UnbalancedDelimiter) as exc_info:
        parse("(do\n  (+ 1 2)")
    assert exc_info.value.position == 0
    assert exc_info.value.line == 1


def test_invalid_operator_position():
    with pytest.raises(InvalidOperator) as exc_info:
        parse("(do (42 1))")
    assert exc_info.value.column == 6


@pytest.mark.parametrize(
    "source,position",
    [
        ("(+ 1 " * 3000 + "1" + ")" * 3000, 5000),
        ("[" * 3000 + "]" * 3000, 1000),
    ]
)
def test_deep_nesting_is_a_parse_error(source, position):
    with pytest.raises(NestingTooDeep) as exc_info:
        parse(source)
    assert exc_info.value.position == position
    with pytest.raises(NestingTooDeep):
        parse_all(source)


def test_nesting_cap_is_configurable(monkeypatch):
    assert parse("[[[]]]", max_depth=3) == VectorLiteral((VectorLiteral((VectorLiteral(()),)),))
    with pytest.raises(NestingTooDeep) as exc_info:
        parse("[[[]]]", max_depth=2)
    assert exc_info.value.token == "["
    assert exc_info.value.column == 3
    monkeypatch.setenv("BIGLISP_MAX_DEPTH", "2")
    with pytest.raises(NestingTooDeep):
        parse("(+ 1 (+ 2 (+ 3 4)))")


def test_nesting_within_the_cap_parses():
    source = "(+ 1 " * 500 + "1" + ")" * 500
    expr = parse(source)
    for _ in range(499):
        expr = expr.args[1]
    assert expr == Form(Symbol("+"), (Literal(1), Literal(1)))


@given(st.text(alphabet=st.characters(blacklist_characters='"')))
def test_lexer_accepts_any_text_without_quotes(text):
    for token in lex(text):
        assert token.value


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=20))
def test_integer_vectors_parse_to_literals(xs):
    source = "[" + " ".join(str(x) for x in xs) + "]"
    assert parse(source) == VectorLiteral(tuple(Literal(x) for x in xs))
