import pytest

from mal.types.errors import MalArityError, MalEvaluationError, MalTypeError
from mal.types.keyword import Keyword
from mal.types.sequence import Array, List, Map


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 5 (* 2 3))", 11),
        ("(- (+ 5 (* 2 3)) 3)", 8),
        ("(/ (- (+ 5 (* 2 3)) 3) 4)", 2),
        ("(/ (- (+ 515 (* 87 311)) 302) 27)", 1010),
        ("(* -3 6)", -18),
        ("(/ (- (+ 515 (* -87 311)) 296) 27)", -994),
        ("(+ 1 2 (+ 1 4))", 8),
        ("(- 10 3 2)", 5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ 5)", 5),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(/ 100 5 2)", 10),
    ],
)
def test_integer_arithmetic(ev, source, expected):
    assert ev(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(+ "a" "b")', '"ab"'),
        ('(+ "a" 1)', '"a1"'),
        ('(+ 1 "a")', '"1a"'),
        ('(+ 1 2 "x" 3)', '"3x3"'),
        ('(+ "" "")', '""'),
    ],
)
def test_string_concatenation(ev, source, expected):
    assert ev(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+)", MalArityError),
        ("(-)", MalArityError),
        ("(*)", MalArityError),
        ("(/)", MalArityError),
        ("(+ 1 :a)", MalTypeError),
        ("(+ nil 1)", MalTypeError),
        ('(- 1 "a")', MalTypeError),
        ("(* 2 true)", MalTypeError),
        ("(/ 1 (list))", MalTypeError),
        ("(/ 1 0)", MalEvaluationError),
        ("(/ 10 2 0)", MalEvaluationError),
        ("(* 9223372036854775807 2)", MalEvaluationError),
        ("(+ 9223372036854775807 1)", MalEvaluationError),
        ("(- -9223372036854775807 2)", MalEvaluationError),
    ],
)
def test_arithmetic_errors(ev, source, error):
    with pytest.raises(error):
        ev(source)


def test_division_by_zero_message(ev):
    with pytest.raises(MalEvaluationError, match="Division by zero"):
        ev("(/ 1 0)")


def test_empty_list_evaluates_to_itself(ev):
    assert ev("()") == List()


def test_arrays_and_maps_evaluate_elements(ev):
    assert ev("[1 2 (+ 1 2)]") == Array.of(1, 2, 3)
    assert ev('{"a" (+ 7 8)}') == Map.of('"a"', 15)
    assert ev("{:a (+ 7 8)}") == Map.of(Keyword(":a"), 15)
    assert ev("{}") == Map()
    assert ev("[]") == Array()
    assert ev("[]") != List()


def test_map_keeps_duplicate_keys_in_order(ev):
    assert ev("{:a 1 :a 2}") == Map.of(Keyword(":a"), 1, Keyword(":a"), 2)
