import pytest

from biglisp.errors import ArityMismatch, DivisionByZero, TypeMismatch, UnboundSymbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(= 1 1 1)", True),
        ("(= 1 1 2)", False),
        ("(eq true true)", True),
        ('(= "a" "a")', True),
        ("(= [1 2] [1 2])", True),
        ("(= [1 2] [1 3])", False),
        ("(= [1 2] [1 2 3])", False),
        ("(= [[1] []] [[1] []])", True),
        ("(= (do) (do))", True),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(> 3 2 1)", True),
        ("(> 1 1)", False),
        ("(< 1 1.5)", True),
        ('(< "a" "b")', True),
        ("(gte 3 3)", True),
        ("(gte 2 3)", False),
        ("(gte 3 2 2)", True),
        ("(lte 3 3 4)", True),
        ("(lte 4 3)", False),
        ("(ne 1 2)", True),
        ("(ne 1 1)", False),
        ('(ne "a" "b")', True),
        ("(ne 1 1 2)", True),
        ("(ne 1 1 1)", False),
        ("(gte 1 2 0)", True),
        ("(gte 1 2 3)", False),
        ("(lte 3 1 2)", True),
        ("(lte 3 2 1)", False),
        ("(zero 0)", True),
        ("(zero 0.0)", True),
        ("(pos -1)", False),
        ("(neg -1)", True),
        ("(even 4)", True),
        ("(odd 4)", False),
        ("(odd -3)", True),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,error",
    [
        ('(= 1 "a")', TypeMismatch),
        ("(= 1 true)", TypeMismatch),
        ("(= [1] 1)", TypeMismatch),
        ('(< "a" 1)', TypeMismatch),
        ("(< true false)", TypeMismatch),
        ("(> [1] [2])", TypeMismatch),
        ('(< 2 1 "x")', TypeMismatch),
        ('(gte 1 "1")', TypeMismatch),
        ('(ne 1 "1")', TypeMismatch),
        ("(= 1)", ArityMismatch),
        ("(<)", ArityMismatch),
        ("(gte 1)", ArityMismatch),
    ]
)
def test_comparison_errors(run, source, error):
    with pytest.raises(error):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and true true)", True),
        ("(and true false)", False),
        ("(and 1 2)", 2),
        ('(and 0 "x")', "x"),
        ("(and)", True),
        ("(or false 3)", 3),
        ("(or false false)", False),
        ("(or 1 2)", 1),
        ("(or)", False),
        ("(not false)", True),
        ("(not true)", False),
        ("(not 0)", False),
        ('(not "")', False),
        ("(not [])", False),
        ("(not (do))", False),
    ]
)
def test_logic(run, source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and false (/ 1 0))", False),
        ("(and true false undefined)", False),
        ("(or true (/ 1 0))", True),
        ("(or false 7 (first []))", 7),
    ]
)
def test_short_circuit_never_evaluates_trailing_arguments(run, source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is type(expected)


def test_and_or_propagate_errors_from_evaluated_arguments(run):
    with pytest.raises(DivisionByZero):
        run("(and true (/ 1 0))")
    with pytest.raises(UnboundSymbol):
        run("(or false nope)")


def test_not_arity(run):
    with pytest.raises(ArityMismatch):
        run("(not 1 2)")
    with pytest.raises(ArityMismatch):
        run("(not)")


def test_negated_comparisons_evaluate_each_argument_once(run):
    lines = []
    source = '(gte (do (println "a") 1) (do (println "b") 2) (do (println "c") 0))'
    assert run(source, output=lines.append) is True
    assert lines == ["a", "b", "c"]
