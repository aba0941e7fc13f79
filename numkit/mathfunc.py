"""Expression graphs over single-precision floats.

Nodes are constants, variables ``x0, x1, ...`` or intermediate operations.
A graph can be evaluated, differentiated symbolically with respect to
``x0``, or differentiated automatically, which leaves the gradient of the
root in every node's ``grad``.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum


class Operation(IntEnum):
    """The operation an intermediate node applies to its operands."""

    UNKNOWN = 0
    ADD = 1
    NEG = 2
    MUL = 3
    REC = 4
    POW = 5
    EXP = 6
    LOG = 7
    SIN = 8
    COS = 9
    TAN = 10


_ARITY = {
    Operation.ADD: 2,
    Operation.NEG: 1,
    Operation.MUL: 2,
    Operation.REC: 1,
    Operation.POW: 2,
    Operation.EXP: 1,
    Operation.LOG: 1,
    Operation.SIN: 1,
    Operation.COS: 1,
    Operation.TAN: 1,
}


def _f32(value: float) -> float:
    """Round a value to single precision, overflowing to infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(eq=False)
class Node:
    """A node of an expression graph.

    A constant has neither an index nor an operation, a variable has an
    index, and an intermediate node has an operation and its operands.
    """

    value: float = 0.0
    grad: float = 0.0
    operation: Operation = Operation.UNKNOWN
    index: int | None = None
    operands: list[Node] = field(default_factory=list)

    def link(self, operand: Node) -> None:
        """Append ``operand`` to this intermediate node's operands."""
        if self.operation is Operation.UNKNOWN or self.index is not None:
            raise ValueError("only intermediate nodes take operands")
        arity = _ARITY[self.operation]
        if len(self.operands) >= arity:
            raise ValueError(f"{self.operation.name} takes {arity} operand(s)")
        self.operands.append(operand)


def _is_variable(node: Node) -> bool:
    return node.index is not None


def _is_constant(node: Node) -> bool:
    return node.index is None and node.operation is Operation.UNKNOWN


def _is_intermediate(node: Node) -> bool:
    return node.index is None and node.operation is not Operation.UNKNOWN


def _operands(node: Node) -> list[Node]:
    arity = _ARITY[node.operation]
    if len(node.operands) != arity:
        raise ValueError(
            f"{node.operation.name} expects {arity} operand(s), has {len(node.operands)}"
        )
    return node.operands


def constant(value: float) -> Node:
    """Return a constant node holding ``value`` at single precision."""
    return Node(value=_f32(float(value)))


def variable(index: int) -> Node:
    """Return the variable ``x<index>``; set its ``value`` before evaluating."""
    if index < 0:
        raise ValueError("variable index must not be negative")
    return Node(index=index)


def intermediate(operation: Operation | int) -> Node:
    """Return an intermediate node with no operands linked yet."""
    operation = Operation(operation)
    if operation is Operation.UNKNOWN:
        raise ValueError("an intermediate node needs an operation")
    return Node(operation=operation)


def _divide(x: float, y: float) -> float:
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and x % 2 == 1


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0.0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _exp(a: float) -> float:
    try:
        return math.exp(a)
    except OverflowError:
        return math.inf


def _log(a: float) -> float:
    if a < 0.0:
        return math.nan
    if a == 0.0:
        return -math.inf
    return math.log(a)


def _trig(function: Callable[[float], float]) -> Callable[[float], float]:
    def apply(a: float) -> float:
        try:
            return function(a)
        except ValueError:
            return math.nan

    return apply


_sin = _trig(math.sin)
_cos = _trig(math.cos)
_tan = _trig(math.tan)

_UNARY: dict[Operation, Callable[[float], float]] = {
    Operation.NEG: lambda a: -a,
    Operation.REC: lambda a: _divide(1.0, a),
    Operation.EXP: _exp,
    Operation.LOG: _log,
    Operation.SIN: _sin,
    Operation.COS: _cos,
    Operation.TAN: _tan,
}


def _apply(operation: Operation, args: list[float]) -> float:
    if operation is Operation.ADD:
        result = args[0] + args[1]
    elif operation is Operation.MUL:
        result = args[0] * args[1]
    elif operation is Operation.POW:
        result = _pow(args[0], args[1])
    else:
        result = _UNARY[operation](args[0])
    return _f32(result)


def calculate(func: Node) -> float:
    """Evaluate the graph rooted at ``func``."""
    if not _is_intermediate(func):
        return func.value
    return _apply(func.operation, [calculate(operand) for operand in _operands(func)])


def _forward(node: Node) -> float:
    node.grad = 0.0
    if not _is_intermediate(node):
        return node.value
    node.value = _apply(node.operation, [_forward(operand) for operand in _operands(node)])
    return node.value


def _accumulate(operand: Node, grad: float) -> None:
    operand.grad = _f32(operand.grad + grad)
    _backward(operand, grad)


def _backward(node: Node, grad: float) -> None:
    if not _is_intermediate(node):
        return
    operands = _operands(node)
    a = operands[0]
    operation = node.operation

    if operation is Operation.ADD:
        _accumulate(a, grad)
        _accumulate(operands[1], grad)
    elif operation is Operation.NEG:
        _accumulate(a, -grad)
    elif operation is Operation.MUL:
        b = operands[1]
        _accumulate(a, _f32(grad * b.value))
        _accumulate(b, _f32(grad * a.value))
    elif operation is Operation.REC:
        _accumulate(a, _f32(_divide(-grad, _f32(a.value * a.value))))
    elif operation is Operation.POW:
        b = operands[1]
        grad = _f32(grad * node.value)
        _accumulate(a, _f32(_divide(_f32(grad * b.value), a.value)))
        _accumulate(b, _f32(grad * _f32(_log(a.value))))
    elif operation is Operation.EXP:
        _accumulate(a, _f32(grad * node.value))
    elif operation is Operation.LOG:
        _accumulate(a, _f32(_divide(grad, a.value)))
    elif operation is Operation.SIN:
        _accumulate(a, _f32(grad * _f32(_cos(a.value))))
    elif operation is Operation.COS:
        _accumulate(a, _f32(grad * -_f32(_sin(a.value))))
    elif operation is Operation.TAN:
        _accumulate(a, _f32(grad * _f32(1.0 + _f32(node.value * node.value))))


def auto_diff(func: Node) -> float:
    """Evaluate ``func`` and store d(func)/d(node) in every node's ``grad``."""
    result = _forward(func)
    func.grad = 1.0
    _backward(func, 1.0)
    return result


def derivative(func: Node) -> Node:
    """Return a new graph for the derivative of ``func`` with respect to ``x0``.

    Other variables are held constant.
    """
    if _is_constant(func):
        return constant(0.0)
    if _is_variable(func):
        return constant(1.0 if func.index == 0 else 0.0)

    operands = _operands(func)
    a = operands[0]
    da = derivative(a)
    operation = func.operation

    if operation is Operation.ADD:
        return add(da, derivative(operands[1]))
    if operation is Operation.NEG:
        return neg(da)
    if operation is Operation.MUL:
        b = operands[1]
        return add(mul(da, b), mul(a, derivative(b)))
    if operation is Operation.REC:
        return neg(mul(da, power(a, constant(-2.0))))
    if operation is Operation.POW:
        b = operands[1]
        return add(
            mul(mul(da, b), power(a, add(b, constant(-1.0)))),
            mul(mul(derivative(b), log(a)), power(a, b)),
        )
    if operation is Operation.EXP:
        return mul(da, exp(a))
    if operation is Operation.LOG:
        return mul(da, rec(a))
    if operation is Operation.SIN:
        return mul(da, cos(a))
    if operation is Operation.COS:
        return neg(mul(da, sin(a)))
    return mul(da, power(cos(a), constant(-2.0)))


_FUNCTION_NAMES = {
    Operation.EXP: "exp",
    Operation.LOG: "log",
    Operation.SIN: "sin",
    Operation.COS: "cos",
    Operation.TAN: "tan",
}


def format_function(func: Node) -> str:
    """Render the graph rooted at ``func`` as an expression."""
    if _is_constant(func):
        return f"{func.value:.2f}"
    if _is_variable(func):
        return f"x{func.index}"

    parts = [format_function(operand) for operand in _operands(func)]
    operation = func.operation
    if operation is Operation.ADD:
        return f"({parts[0]} + {parts[1]})"
    if operation is Operation.MUL:
        return f"{parts[0]} * {parts[1]}"
    if operation is Operation.NEG:
        return f"-{parts[0]}"
    if operation is Operation.REC:
        return f"({parts[0]})^(-1)"
    if operation is Operation.POW:
        return f"({parts[0]})^({parts[1]})"
    return f"{_FUNCTION_NAMES[operation]}({parts[0]})"


def _node(operation: Operation, *operands: Node) -> Node:
    node = intermediate(operation)
    for operand in operands:
        node.link(operand)
    return node


def add(a: Node, b: Node) -> Node:
    """Return ``a + b``, folding constants and dropping a zero term."""
    if _is_constant(a) and _is_constant(b):
        return constant(a.value + b.value)
    if _is_constant(a) and a.value == 0.0:
        return b
    if _is_constant(b) and b.value == 0.0:
        return a
    return _node(Operation.ADD, a, b)


def neg(a: Node) -> Node:
    """Return ``-a``."""
    if _is_constant(a):
        return constant(-a.value)
    return _node(Operation.NEG, a)


def sub(a: Node, b: Node) -> Node:
    """Return ``a - b`` as ``a + (-b)``."""
    return add(a, neg(b))


def mul(a: Node, b: Node) -> Node:
    """Return ``a * b``, folding constants and factors of zero and one."""
    if _is_constant(a) and _is_constant(b):
        return constant(a.value * b.value)
    if _is_constant(a):
        if a.value == 0.0:
            return a
        if a.value == 1.0:
            return b
    elif _is_constant(b):
        if b.value == 0.0:
            return b
        if b.value == 1.0:
            return a
    return _node(Operation.MUL, a, b)


def rec(a: Node) -> Node:
    """Return ``1 / a``."""
    if _is_constant(a):
        return constant(_divide(1.0, a.value))
    return _node(Operation.REC, a)


def div(a: Node, b: Node) -> Node:
    """Return ``a / b`` as ``a * (1 / b)``."""
    return mul(a, rec(b))


def power(a: Node, b: Node) -> Node:
    """Return ``a ** b``, folding constants and trivial bases and exponents."""
    if _is_constant(a) and _is_constant(b):
        return constant(_pow(a.value, b.value))
    if _is_constant(a):
        if a.value in (0.0, 1.0):
            return a
    elif _is_constant(b):
        if b.value == 0.0:
            return constant(1.0)
        if b.value == 1.0:
            return a
    return _node(Operation.POW, a, b)


def _unary(operation: Operation, a: Node) -> Node:
    if _is_constant(a):
        return constant(_UNARY[operation](a.value))
    return _node(operation, a)


def exp(a: Node) -> Node:
    """Return exp(a)."""
    return _unary(Operation.EXP, a)


def log(a: Node) -> Node:
    """Return log(a)."""
    return _unary(Operation.LOG, a)


def sin(a: Node) -> Node:
    """Return sin(a)."""
    return _unary(Operation.SIN, a)


def cos(a: Node) -> Node:
    """Return cos(a)."""
    return _unary(Operation.COS, a)


def tan(a: Node) -> Node:
    """Return tan(a)."""
    return _unary(Operation.TAN, a)