# numkit

A small collection of numeric tools, using only the standard library:

- `numkit.calculate24` — solves the "24 game": reduce a list of whole numbers
  to a target with `+`, `-`, `*` and exact `/`.
- `numkit.fraction` — turns a single-precision float into a fraction, either
  exactly as an odd numerator and a power-of-two shift, or as the closest
  fraction found with a bounded denominator.
- `numkit.integer` — a signed `Integer` stored as 64-bit limbs, with
  comparison, negation, addition and subtraction.
- `numkit.bytenum` — fixed-width unsigned arithmetic on little-endian byte
  strings: compare, add, subtract, multiply, divide, two's complement, and
  conversion to and from hexadecimal and decimal text.
- `numkit.mathfunc` — expression graphs of constants, variables and
  operations, with evaluation, reverse-mode automatic differentiation and
  symbolic derivatives.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

`numkit-24` solves for 24. Give the numbers as arguments:

```
numkit-24 4 7 8 8
```

With no arguments it asks for how many numbers to use and then reads them
from standard input. Each step is printed as `left op right = result`, the
final step first; when no solution exists it prints `No Solution`.

`numkit-frac` prints the closest fraction to a number, with denominators
below 20000, as `value = numerator / denominator`:

```
numkit-frac 3.14159265
```

With no argument it prompts for the number on standard input.

## Library use

### The 24 game

```python
from numkit.calculate24 import solve, format_solution

steps = solve([4, 7, 8, 8], 24)
if steps is None:
    print("no solution")
else:
    print(format_solution(steps))
```

`solve(numbers, target=24)` returns a list of `Step` tuples
(`left`, `op`, `right`, `result`) in the order they are applied, or `None`.
Subtraction always takes the larger value minus the smaller, and division is
only used when it is exact.

### Fractions

```python
from numkit.fraction import float_to_fraction, float_to_fraction_shift

float_to_fraction(3.14159265, 20000)   # (numerator, denominator)
float_to_fraction_shift(0.75)          # (3, 2): 0.75 == 3 / 2**2
```

`float_to_fraction` tries every denominator below the limit and keeps the
closest fraction, reduced to lowest terms. Values too large for a 32-bit
numerator give `(INT_MAX, 1)`, values too small give `(0, INT_MAX)`, and a
limit below 2 raises `ValueError`.

### Integers

```python
from numkit.integer import Integer, compare

a = Integer(2**70)
b = Integer(-5)
print(int(a + b), int(a - b), a.compare(b), compare(b, a))
print(a.size())   # bytes used by the magnitude
```

`Integer` accepts a Python `int` or another `Integer`, mixes with plain
`int` in `+`, `-`, `==` and ordering comparisons, and converts back with
`int()`.

### Fixed-width byte arithmetic

```python
from numkit import bytenum

a = bytenum.parse_decimal("1000", 4)      # 4 bytes, lowest byte first
b = bytenum.parse_decimal("7", 4)
q, r = bytenum.divide(a, b)
print(bytenum.to_decimal(q), bytenum.to_decimal(r), bytenum.to_hex(a))
```

Operands must have the same width; results have that width and wrap around.
`add_small` and `mul_small` take an unsigned 32-bit value, `divmod_small` a
one-byte divisor. Division by zero raises `ZeroDivisionError`.

### Expression graphs

```python
from numkit import mathfunc as mf

x = mf.variable(0)
f = mf.mul(mf.sin(x), mf.constant(2.0))

x.value = 1.0
print(mf.calculate(f))
print(mf.auto_diff(f), x.grad)                  # value, and d f / d x0
print(mf.format_function(mf.derivative(f)))
```

Builders are `add`, `neg`, `sub`, `mul`, `rec`, `div`, `power`, `exp`,
`log`, `sin`, `cos` and `tan`; they fold constants and drop trivial terms.
Values are kept at single precision. `derivative` differentiates with respect
to `x0`, treating other variables as constants. Nodes can also be built by
hand with `intermediate(Operation.ADD)` and `Node.link`.

## Not provided

- `Integer` has no multiplication, division or power, and cannot be built
  from a string.
- There are no commands for `bytenum`, `integer` or `mathfunc`; they are
  used as libraries only.