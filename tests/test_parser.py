import pytest
from polyroots.parser import parse_polynomial, tokenize, normalize, MAX_DEGREE
from polyroots.formatter import format_polynomial
from polyroots.types import EmptyExpression, InvalidExpression

def test_quadratic_descending_order():
    assert parse_polynomial("x^2 - 3x + 2") == [1.0, -3.0, 2.0]

def test_whitespace_and_case_are_ignored():
    assert parse_polynomial("  X ^ 2-3 X+2 ") == [1.0, -3.0, 2.0]

def test_missing_powers_are_zero_filled():
    assert parse_polynomial("-x^3 + 5") == [-1.0, 0.0, 0.0, 5.0]

def test_bare_x_and_signed_first_term():
    assert parse_polynomial("x") == [1.0, 0.0]
    assert parse_polynomial("+x") == [1.0, 0.0]
    assert parse_polynomial("-x+4") == [-1.0, 4.0]

def test_decimal_coefficients():
    assert parse_polynomial("2.5x^2 - 0.5") == [2.5, 0.0, -0.5]

def test_constants():
    assert parse_polynomial("0") == [0.0]
    assert parse_polynomial("1") == [1.0]
    assert parse_polynomial("5") == [5.0]
    assert parse_polynomial("-7") == [-7.0]

def test_repeated_exponent_keeps_last_term():
    assert parse_polynomial("x^2 + 3x^2") == [3.0, 0.0, 0.0]

def test_empty_input():
    with pytest.raises(EmptyExpression):
        parse_polynomial("")
    with pytest.raises(EmptyExpression):
        parse_polynomial("   ")

@pytest.mark.parametrize("text,position", [
    ("invalid", 0),
    ("y^2", 0),
    ("3*x", 1),
    ("(x+1)", 0),
    ("x++1", 2),
    ("2x3", 2),
    ("x^", 2),
    ("x^2.5", 2),
    ("x^2^3", 3),
    ("2.", 1),
    ("x-", 2),
])
def test_invalid_expressions_report_position(text, position):
    with pytest.raises(InvalidExpression) as exc:
        parse_polynomial(text)
    assert exc.value.position == position
    assert str(exc.value).startswith("Invalid polynomial expression")

def test_overflowing_coefficient_is_rejected_at_its_token():
    with pytest.raises(InvalidExpression) as exc:
        parse_polynomial("9" * 400 + "x^2 + x + 1")
    assert exc.value.position == 0
    assert "coefficient out of range" in str(exc.value)

    with pytest.raises(InvalidExpression) as exc:
        parse_polynomial("x^2 - " + "9" * 400)
    assert exc.value.position == 4

def test_exponent_above_max_degree_is_rejected():
    assert len(parse_polynomial(f"x^{MAX_DEGREE}")) == MAX_DEGREE + 1
    for text in (f"x^{MAX_DEGREE + 1}", "x^50000000", "x^" + "9" * 5000):
        with pytest.raises(InvalidExpression) as exc:
            parse_polynomial(text)
        assert exc.value.position == 2
        assert f"maximum degree {MAX_DEGREE}" in str(exc.value)

def test_exponent_leading_zeros():
    assert parse_polynomial("x^02 + 1") == [1.0, 0.0, 1.0]

def test_tokenizer_kinds():
    kinds = [t.kind for t in tokenize(normalize("-3x^2 + 1.5"))]
    assert kinds == ["SIGN", "NUMBER", "X", "CARET", "NUMBER", "SIGN", "NUMBER"]

@pytest.mark.parametrize("coeffs", [
    [1.0, -3.0, 2.0],
    [1.0, 0.0, -1.0, 0.0],
    [-1.0, 3.0, -2.0],
    [2.0, 0.0, 0.0, -5.0],
    [-4.0, 0.0, 7.0],
    [1.5, -0.25],
    [1e-05, 1.0],
    [2.5e-07, 0.0, -3.0],
])
def test_format_then_parse_round_trip(coeffs):
    assert parse_polynomial(format_polynomial(coeffs)) == coeffs
