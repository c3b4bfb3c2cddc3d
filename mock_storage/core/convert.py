import inspect
import math
import textwrap
from decimal import Decimal
from typing import Any, Optional, Set

class _Undefined:
    """
    Stand-in for a JavaScript `undefined` argument.

    Storage methods use it as the default for every parameter so a missing
    argument can be told apart from an explicit `None` (which is `null`).
    """
    _instance: Optional['_Undefined'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __str__(self) -> str:
        return 'undefined'

    def __bool__(self) -> bool:
        return False

UNDEFINED = _Undefined()

def convert(value: Any) -> str:
    """
    Converts any value to the string Storage uses as its key or value.

    A quirk of Storage is that it accepts every type for keys and values but,
    unlike a dict, silently turns them into strings first, so `123` and `"123"`
    address the same entry. The rules follow JavaScript's `String(value)`.
    """
    return _convert(value, set())

def _convert(value: Any, seen: Set[int]) -> str:
    if value is None:
        return 'null'
    if value is UNDEFINED:
        return 'undefined'
    if isinstance(value, str):
        return value if type(value) is str else str(value)
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return _join(value, seen)
    if inspect.isroutine(value) or inspect.isclass(value):
        return _source_of(value)
    if type(value).__str__ is not object.__str__:
        return str(value)
    return '[object Object]'

def _join(items, seen: Set[int]) -> str:
    # Array.prototype.join renders a cyclic reference as an empty string
    if id(items) in seen:
        return ''
    seen.add(id(items))
    try:
        return ','.join('' if item is None or item is UNDEFINED else _convert(item, seen) for item in items)
    finally:
        seen.discard(id(items))

def _source_of(fn: Any) -> str:
    try:
        return textwrap.dedent(inspect.getsource(fn)).strip()
    except (OSError, TypeError):
        name = getattr(fn, '__name__', '')
        return f"function {name}() {{ [native code] }}"

def format_number(value: float) -> str:
    """Formats a float the way JavaScript's Number.prototype.toString does."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    # repr() yields the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    while len(digits) > 1 and digits[0] == 0:
        digits.pop(0)

    k = len(digits)
    n = exponent + k
    s = ''.join(str(d) for d in digits)

    if k <= n <= 21:
        return sign + s + '0' * (n - k)
    if 0 < n <= 21:
        return sign + s[:n] + '.' + s[n:]
    if -6 < n <= 0:
        return sign + '0.' + '0' * (-n) + s

    e = n - 1
    exp = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + s + exp
    return sign + s[0] + '.' + s[1:] + exp
