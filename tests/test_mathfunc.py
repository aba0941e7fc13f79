import math

import pytest

from numkit.mathfunc import (
    Operation,
    add,
    auto_diff,
    calculate,
    constant,
    cos,
    derivative,
    div,
    exp,
    format_function,
    intermediate,
    log,
    mul,
    neg,
    power,
    rec,
    sin,
    sub,
    tan,
    variable,
)


def _x(value):
    node = variable(0)
    node.value = value
    return node


@pytest.mark.parametrize(
    "build, reference",
    [
        (sin, math.sin),
        (cos, math.cos),
        (tan, math.tan),
        (exp, math.exp),
        (log, math.log),
    ],
)
def test_calculate_unary_matches_math(build, reference):
    x = _x(0.5)
    assert calculate(build(x)) == pytest.approx(reference(0.5), rel=1e-6)


def test_constants_fold_in_add():
    a, b = constant(2), constant(3)
    result = add(a, b)
    assert result.operation is Operation.UNKNOWN
    assert result.index is None
    assert result.operands == []
    assert calculate(result) == calculate(a) + calculate(b)


def test_add_drops_zero_term():
    x = _x(1.0)
    assert add(constant(0), x) is x
    assert add(x, constant(0)) is x


def test_mul_zero_and_one():
    x = _x(1.0)
    zero, one = constant(0), constant(1)
    assert mul(zero, x) is zero
    assert mul(x, zero) is zero
    assert mul(one, x) is x
    assert mul(x, one) is x


def test_power_trivial_cases():
    x = _x(2.0)
    folded = power(x, constant(0))
    assert folded.operation is Operation.UNKNOWN
    assert calculate(folded) == 1.0
    assert power(x, constant(1)) is x
    base = constant(1)
    assert power(base, x) is base


def test_unary_on_constant_folds():
    result = exp(constant(0.5))
    assert result.operation is Operation.UNKNOWN
    assert result.operands == []
    assert calculate(result) == pytest.approx(math.exp(0.5), rel=1e-6)


def test_binary_builds_intermediate():
    x, y = _x(1.0), variable(1)
    node = add(x, y)
    assert node.operation is Operation.ADD
    assert node.operands == [x, y]


def test_sub_is_add_of_negation():
    x, y = _x(1.0), variable(1)
    node = sub(x, y)
    assert node.operation is Operation.ADD
    assert node.operands[0] is x
    assert node.operands[1].operation is Operation.NEG
    assert node.operands[1].operands[0] is y


def test_div_is_mul_of_reciprocal():
    x, y = _x(1.0), variable(1)
    node = div(x, y)
    assert node.operation is Operation.MUL
    assert node.operands[1].operation is Operation.REC
    assert node.operands[1].operands[0] is y


def test_link_builds_evaluable_node():
    x, y = _x(1.5), variable(1)
    y.value = 2.25
    node = intermediate(Operation.ADD)
    node.link(x)
    node.link(y)
    assert calculate(node) == x.value + y.value
    with pytest.raises(ValueError):
        node.link(x)


def test_link_rejects_non_intermediate():
    with pytest.raises(ValueError):
        constant(1).link(_x(1.0))
    with pytest.raises(ValueError):
        variable(2).link(_x(1.0))


def test_invalid_construction():
    with pytest.raises(ValueError):
        intermediate(Operation.UNKNOWN)
    with pytest.raises(ValueError):
        variable(-1)


def test_missing_operands_raise():
    node = intermediate(Operation.MUL)
    node.link(_x(1.0))
    with pytest.raises(ValueError):
        calculate(node)
    with pytest.raises(ValueError):
        format_function(node)


@pytest.mark.parametrize(
    "build",
    [
        lambda x: mul(x, x),
        sin,
        cos,
        tan,
        exp,
        log,
        rec,
        neg,
        lambda x: power(x, constant(3)),
        lambda x: power(constant(2), x),
        lambda x: power(x, x),
        lambda x: div(sin(x), x),
        lambda x: sub(exp(x), mul(x, cos(x))),
    ],
)
def test_auto_diff_agrees_with_derivative(build):
    x = _x(0.7)
    func = build(x)
    result = auto_diff(func)
    assert result == calculate(func)
    assert func.grad == 1.0
    assert x.grad == pytest.approx(calculate(derivative(func)), rel=1e-4)


def test_auto_diff_product_of_two_variables():
    x, y = _x(1.25), variable(1)
    y.value = 1.5
    func = mul(x, y)
    auto_diff(func)
    assert x.grad == y.value
    assert y.grad == x.value


def test_auto_diff_shared_operand_accumulates():
    x = _x(3.0)
    func = add(x, x)
    auto_diff(func)
    assert x.grad == calculate(derivative(func))


def test_auto_diff_resets_gradients():
    x = _x(0.4)
    func = mul(sin(x), x)
    auto_diff(func)
    first = x.grad
    auto_diff(func)
    assert x.grad == first


def test_derivative_of_leaves():
    assert calculate(derivative(constant(5))) == 0.0
    assert calculate(derivative(_x(2.0))) == 1.0
    other = variable(1)
    other.value = 4.0
    assert calculate(derivative(other)) == 0.0


def test_constants_are_single_precision():
    value = calculate(constant(0.1))
    assert value == pytest.approx(0.1, rel=1e-7)
    assert value != 0.1


def test_ieee_results_instead_of_errors():
    x = _x(-1.0)
    assert math.isnan(calculate(log(x)))
    zero = _x(0.0)
    assert calculate(rec(zero)) == math.inf
    assert calculate(log(zero)) == -math.inf


def test_format_pinned_examples():
    x, y = _x(1.0), variable(1)
    assert format_function(add(x, constant(2))) == "(x0 + 2.00)"
    assert format_function(power(x, y)) == "(x0)^(x1)"
    assert format_function(sin(x)) == "sin(x0)"


def test_format_composes():
    x, y = _x(1.0), variable(1)
    inner = add(x, y)
    assert format_function(neg(inner)) == "-" + format_function(inner)
    assert format_function(mul(x, y)) == f"{format_function(x)} * {format_function(y)}"
    assert format_function(exp(inner)).startswith("exp(")
    assert format_function(rec(x)).endswith(")^(-1)")