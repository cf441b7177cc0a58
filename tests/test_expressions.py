import pytest

from dsprimer.expressions import (
    bracket_check,
    bracket_check_array,
    bracket_check_counts,
    evaluate_infix,
    evaluate_postfix,
    infix_to_postfix,
    main,
)

BALANCED = ["", "()", "{[()]}", "a(b)c", "([]{})"]
UNBALANCED = ["(", ")", "(]", "(()", "{)"]


@pytest.mark.parametrize("text", BALANCED)
def test_balanced_accepted_by_all(text):
    assert bracket_check(text) is True
    assert bracket_check_array(text) is True
    assert bracket_check_counts(text) is True


@pytest.mark.parametrize("text", UNBALANCED)
def test_unbalanced_rejected_by_all(text):
    assert bracket_check(text) is False
    assert bracket_check_array(text) is False
    assert bracket_check_counts(text) is False


def test_crossed_brackets_only_caught_by_stack():
    assert bracket_check("([)]") is False
    assert bracket_check_array("([)]") is False
    assert bracket_check_counts("([)]") is True


def test_worked_example_postfix():
    assert infix_to_postfix("3+2*(1+2)") == "3212+*+"


def test_worked_example_values():
    assert evaluate_postfix("3212+*+") == 9
    assert evaluate_infix("3+2*(1+2)") == 9


@pytest.mark.parametrize(
    "expr", ["1+2", "8-4-2", "9/3*2", "2*(3+4)-5", "(1+(2*3))/2", "7"]
)
def test_infix_matches_postfix_route(expr):
    assert evaluate_infix(expr) == evaluate_postfix(infix_to_postfix(expr))


def test_single_digit_passes_through():
    assert infix_to_postfix("7") == "7"
    assert evaluate_infix("7") == 7


def test_left_associativity():
    assert evaluate_infix("8-4-2") == evaluate_infix("(8-4)-2")
    assert evaluate_infix("8/4/2") == evaluate_infix("(8/4)/2")


def test_subtraction_is_not_commutative():
    assert evaluate_infix("1-2") == -evaluate_infix("2-1")


def test_division_truncates_toward_zero():
    assert evaluate_infix("(0-7)/2") == -3


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")
    with pytest.raises(ZeroDivisionError):
        evaluate_infix("1/0")


def test_malformed_expressions():
    with pytest.raises(ValueError):
        evaluate_postfix("")
    with pytest.raises(ValueError):
        evaluate_postfix("1+")
    with pytest.raises(ValueError):
        evaluate_infix("+")


def test_unclosed_parenthesis_ignored():
    assert infix_to_postfix("(1+2") == infix_to_postfix("1+2")
    assert evaluate_infix("(1+2") == evaluate_infix("1+2")


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0", "3212+*+", "9", "9"]


def test_main_with_expression(capsys):
    assert main(["2*3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == infix_to_postfix("2*3")
    assert lines[2] == lines[3] == str(evaluate_infix("2*3"))