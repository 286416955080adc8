'''
Arbitrary precision unsigned integers over an array namespace.

    >>> a = BigUint.parse('999')
    >>> str(a * a)
    '998001'
    >>> q, r = BigUint.parse('100').div_rem(BigUint.parse('9'))
    >>> str(q), str(r)
    ('11', '1')

Values are immutable.  Limbs live in a 1-D uint64 array of the chosen
namespace (numpy unless told otherwise); see mpn.py for the layout.
'''

import enum

import numpy as np

import mpn

class ParseError(ValueError):
    pass

class EmptyInputError(ParseError):
    def __init__(self):
        super().__init__('cannot parse an empty string')

class InvalidDigitError(ParseError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f'invalid digit {char!r} at position {position}')

class BigUintArithmeticError(ArithmeticError):
    pass

class UnderflowError(BigUintArithmeticError):
    def __init__(self, msg='result would be negative'):
        super().__init__(msg)

class DivisionByZeroError(BigUintArithmeticError, ZeroDivisionError):
    def __init__(self, msg='division by zero'):
        super().__init__(msg)

class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

DIGITS = frozenset('0123456789')

class BigUint:
    def __init__(self, data):
        if type(data) is BigUint:
            self.xp = data.xp
            self._limbs = data._limbs
        else:
            xp = self.xp = data.__array_namespace__()
            if not xp.isdtype(data.dtype, 'unsigned integer'):
                raise TypeError(data.dtype)
            if data.ndim != 1:
                raise ValueError(f'limbs must be 1-D, got shape {data.shape}')
            # own a private copy so callers can't mutate us through their array
            data = xp.asarray(xp.astype(data, xp.uint64), copy=True)
            if xp.any(data >= mpn.RADIX):
                raise ValueError(f'limbs must be below {mpn.RADIX}')
            self._limbs = mpn.normalize(data)
        mpn.ASSERT_CANONICAL(self._limbs)
    @classmethod
    def _wrap(cls, limbs):
        # trusted path for canonical limbs produced by mpn
        self = cls.__new__(cls)
        self.xp = limbs.__array_namespace__()
        self._limbs = limbs
        return self
    @classmethod
    def parse(cls, text, *, xp=None):
        '''Parse a non-empty string of ascii decimal digits.

        Leading zeros are accepted and dropped.  Raises EmptyInputError or
        InvalidDigitError (which carries the offending char and its position).
        '''
        if not isinstance(text, str):
            raise TypeError(f'expected str, got {type(text).__name__}')
        if not text:
            raise EmptyInputError()
        for position, char in enumerate(text):
            if char not in DIGITS:
                raise InvalidDigitError(char, position)
        return cls._wrap(mpn.from_decimal(text, np if xp is None else xp))
    @classmethod
    def from_int(cls, n, *, xp=None):
        if type(n) is bool or not isinstance(n, int):
            raise TypeError(f'expected int, got {type(n).__name__}')
        if n < 0:
            raise ValueError(f'{n} is negative')
        return cls._wrap(mpn.from_int(n, np if xp is None else xp))
    @classmethod
    def zero(cls, xp=None):
        return cls._wrap(mpn.zero(np if xp is None else xp))
    @classmethod
    def one(cls, xp=None):
        return cls.from_int(1, xp=xp)
    @property
    def limbs(self):
        '''Copy of the limbs, least significant first.'''
        return self.xp.asarray(self._limbs, copy=True)
    @property
    def limb_count(self):
        return self._limbs.shape[0]
    def is_zero(self):
        return mpn.is_zero(self._limbs)
    def to_decimal_string(self):
        return mpn.to_decimal(self._limbs)
    def _coerce(self, other):
        if type(other) is BigUint:
            if other.xp is not self.xp:
                raise TypeError(f'cannot mix {self.xp.__name__} and {other.xp.__name__} values')
            return other
        return BigUint.from_int(other, xp=self.xp)
    def compare(self, other):
        other = self._coerce(other)
        return Ordering(mpn.cmp(self._limbs, other._limbs))
    def add(self, other):
        other = self._coerce(other)
        return BigUint._wrap(mpn.add_n(self._limbs, other._limbs))
    def sub(self, other):
        other = self._coerce(other)
        if mpn.cmp(self._limbs, other._limbs) < 0:
            raise UnderflowError()
        return BigUint._wrap(mpn.sub_n(self._limbs, other._limbs))
    def mul(self, other):
        other = self._coerce(other)
        return BigUint._wrap(mpn.mul_n(self._limbs, other._limbs))
    def div_rem(self, other):
        '''(quotient, remainder) with self == quotient * other + remainder.'''
        other = self._coerce(other)
        if other.is_zero():
            raise DivisionByZeroError()
        q, r = mpn.divrem(self._limbs, other._limbs)
        return BigUint._wrap(q), BigUint._wrap(r)
    def div(self, other):
        return self.div_rem(other)[0]
    def rem(self, other):
        return self.div_rem(other)[1]
    def __int__(self):
        return mpn.to_int(self._limbs)
    def __bool__(self):
        return not self.is_zero()
    def __hash__(self):
        return hash(int(self))
    def __str__(self):
        return self.to_decimal_string()
    def __repr__(self):
        return f'BigUint({self.to_decimal_string()!r})'

# python operator sugar over the named operations.
# ints are accepted on either side and coerced with from_int.
def __BigUintOpBinary(method):
    def op(a, b):
        if type(b) is not BigUint and (type(b) is bool or not isinstance(b, int)):
            return NotImplemented
        return getattr(a, method)(b)
    return op
def __BigUintOpBinaryReflected(method):
    def op(b, a):
        if type(a) is bool or not isinstance(a, int):
            return NotImplemented
        return getattr(BigUint.from_int(a, xp=b.xp), method)(b)
    return op
def __BigUintOpCompare(test):
    def op(a, b):
        if type(b) is not BigUint and (type(b) is bool or not isinstance(b, int)):
            return NotImplemented
        if type(b) is not BigUint and b < 0:
            # every BigUint is above any negative int
            return test(Ordering.GREATER)
        return test(a.compare(b))
    return op
for opname, method in [
        ['add', 'add'],
        ['sub', 'sub'],
        ['mul', 'mul'],
        ['floordiv', 'div'],
        ['mod', 'rem'],
        ['divmod', 'div_rem'],
]:
    setattr(BigUint, f'__{opname}__', __BigUintOpBinary(method))
    setattr(BigUint, f'__r{opname}__', __BigUintOpBinaryReflected(method))
for opname, test in [
        ['eq', lambda o: o == Ordering.EQUAL],
        ['ne', lambda o: o != Ordering.EQUAL],
        ['lt', lambda o: o == Ordering.LESS],
        ['le', lambda o: o != Ordering.GREATER],
        ['gt', lambda o: o == Ordering.GREATER],
        ['ge', lambda o: o != Ordering.LESS],
]:
    setattr(BigUint, f'__{opname}__', __BigUintOpCompare(test))

def parse(text, *, xp=None):
    return BigUint.parse(text, xp=xp)

def compare(a, b):
    return a.compare(b)

def add(a, b):
    return a.add(b)

def sub(a, b):
    return a.sub(b)

def mul(a, b):
    return a.mul(b)

def div_rem(a, b):
    return a.div_rem(b)

if __name__ == '__main__':
    import random
    rng = random.Random(0)
    for idx in range(64):
        x = rng.getrandbits(rng.randrange(1, 512))
        y = rng.getrandbits(rng.randrange(1, 256)) + 1
        a = BigUint.from_int(x)
        b = BigUint.from_int(y)
        assert int(a + b) == x + y
        assert int(a * b) == x * y
        assert divmod(a, b) == divmod(x, y)
        if x >= y:
            assert int(a - b) == x - y
        assert BigUint.parse(str(a)) == a
    print('ok')
