# representation:
#  1-D array of uint64 limbs, least significant limb first
#  each limb holds LIMB_DIGITS decimal digits, so decimal i/o is a chunking job
#  and a limb product (< 10**18) plus a carry always fits in a uint64.
#  canonical form has no high zero limbs; zero is a single 0 limb, never empty.
# the xp namespace is always taken from the operand arrays, so anything that
# implements __array_namespace__ (numpy >= 2, array_api_strict) works.

import numpy as np

LIMB_DIGITS = 9
RADIX = 10 ** LIMB_DIGITS
LIMB_MAX = RADIX - 1

WANT_ASSERT = True

def ASSERT_NOCARRY(expr):
    assert not expr

def zero(xp=np):
    return xp.zeros(1, dtype=xp.uint64)

def _zeros(xp, n, dtype):
    return xp.zeros(n, dtype=dtype)

def _pad(d, n):
    xp = d.__array_namespace__()
    if d.shape[0] >= n:
        return d
    return xp.concat([d, _zeros(xp, n - d.shape[0], d.dtype)])

def normalize(d):
    '''Strip high zero limbs.  An all-zero or empty vector becomes [0].'''
    xp = d.__array_namespace__()
    nz = xp.nonzero(d)[0]
    if nz.shape[0] == 0:
        return zero(xp)
    return d[:int(nz[-1]) + 1]

def is_zero(d):
    return d.shape[0] == 1 and int(d[0]) == 0

if WANT_ASSERT:
    def ASSERT_CANONICAL(d):
        xp = d.__array_namespace__()
        assert d.ndim == 1 and d.shape[0] >= 1
        assert d.shape[0] == 1 or int(d[-1]) != 0
        assert not xp.any(d >= RADIX)
else:
    def ASSERT_CANONICAL(d):
        pass

def _ripple_carry(d):
    # single low-to-high scan, for when one pass left a limb at RADIX or more
    limbs = []
    carry = 0
    for i in range(d.shape[0]):
        carry, limb = divmod(int(d[i]) + carry, RADIX)
        limbs.append(limb)
    while carry:
        carry, limb = divmod(carry, RADIX)
        limbs.append(limb)
    xp = d.__array_namespace__()
    return xp.asarray(limbs, dtype=d.dtype)

def propagate_carry(d):
    # limbs may hold anything below 2**64 on entry.
    # one vectorised pass moves every limb's overflow a limb up, growing the
    # top when it overflows. a carry landing on a LIMB_MAX limb is left for
    # _ripple_carry, so long LIMB_MAX runs stay linear.
    xp = d.__array_namespace__()
    carry = d // RADIX
    if not xp.any(carry):
        return d
    d = d % RADIX
    shifted = xp.concat([_zeros(xp, 1, d.dtype), carry])
    if int(carry[-1]) == 0:
        shifted = shifted[:-1]
    else:
        d = xp.concat([d, _zeros(xp, 1, d.dtype)])
    d = d + shifted
    if not xp.any(d >= RADIX):
        return d
    return _ripple_carry(d)

def cmp(a, b):
    '''-1, 0 or 1 as a <, ==, > b.  Both must be canonical.'''
    if a.shape[0] != b.shape[0]:
        return -1 if a.shape[0] < b.shape[0] else 1
    xp = a.__array_namespace__()
    differ = xp.nonzero(a != b)[0]
    if differ.shape[0] == 0:
        return 0
    top = int(differ[-1])
    return -1 if int(a[top]) < int(b[top]) else 1

def add_n(a, b):
    size = max(a.shape[0], b.shape[0])
    return normalize(propagate_carry(_pad(a, size) + _pad(b, size)))

def _ripple_borrow(diff):
    # after one pass every limb is >= -1; settle the rest in a single scan
    limbs = []
    borrow = 0
    for i in range(diff.shape[0]):
        limb = int(diff[i]) - borrow
        borrow = 1 if limb < 0 else 0
        limbs.append(limb + RADIX * borrow)
    # a >= b, so nothing can borrow out of the top limb
    ASSERT_NOCARRY(borrow)
    xp = diff.__array_namespace__()
    return xp.asarray(limbs, dtype=diff.dtype)

def sub_n(a, b):
    '''a - b for a >= b.'''
    xp = a.__array_namespace__()
    size = a.shape[0]
    assert b.shape[0] <= size
    diff = xp.astype(a, xp.int64) - xp.astype(_pad(b, size), xp.int64)
    borrow = diff < 0
    if xp.any(borrow):
        ASSERT_NOCARRY(bool(borrow[-1]))
        diff = xp.where(borrow, diff + RADIX, diff)
        incoming = xp.concat([xp.zeros(1, dtype=xp.bool), borrow[:-1]])
        diff = diff - xp.astype(incoming, xp.int64)
        if xp.any(diff < 0):
            diff = _ripple_borrow(diff)
    return normalize(xp.astype(diff, xp.uint64))

def mul_1(a, limb):
    assert 0 <= limb < RADIX
    if limb == 0:
        return zero(a.__array_namespace__())
    return normalize(propagate_carry(a * limb))

def lshift_limbs(a, n):
    '''a * RADIX**n'''
    if n == 0 or is_zero(a):
        return a
    xp = a.__array_namespace__()
    return xp.concat([_zeros(xp, n, a.dtype), a])

def mul_n(a, b):
    # schoolbook: one partial product per limb of b, shifted into place and summed
    xp = a.__array_namespace__()
    accum = zero(xp)
    for i in range(b.shape[0]):
        limb = int(b[i])
        if limb == 0:
            continue
        accum = add_n(accum, lshift_limbs(mul_1(a, limb), i))
    return accum

def _quotient_limb(r, b):
    # largest q in [0, RADIX) with b*q <= r; r < b*RADIX holds on entry
    if cmp(r, b) < 0:
        return 0
    lo, hi = 1, LIMB_MAX
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if cmp(mul_1(b, mid), r) <= 0:
            lo = mid
        else:
            hi = mid - 1
    return lo

def divrem(a, b):
    '''(a // b, a % b) by long division.  b must be nonzero.'''
    assert not is_zero(b)
    xp = a.__array_namespace__()
    if cmp(a, b) < 0:
        return zero(xp), a
    quotient = []
    r = zero(xp)
    for i in range(a.shape[0] - 1, -1, -1):
        # shift the running remainder up a limb and bring down a[i]
        r = normalize(xp.concat([a[i:i+1], r]))
        q = _quotient_limb(r, b)
        if q:
            r = sub_n(r, mul_1(b, q))
        quotient.append(q)
    quotient.reverse()
    return normalize(xp.asarray(quotient, dtype=xp.uint64)), r

def from_decimal(digits, xp=np):
    '''Limbs for a string of ascii digits, already validated.'''
    digits = digits.lstrip('0')
    if not digits:
        return zero(xp)
    limbs = [
        int(digits[max(0, end - LIMB_DIGITS):end])
        for end in range(len(digits), 0, -LIMB_DIGITS)
    ]
    return xp.asarray(limbs, dtype=xp.uint64)

def to_decimal(d):
    top = d.shape[0] - 1
    result = str(int(d[top]))
    for i in range(top - 1, -1, -1):
        result += str(int(d[i])).zfill(LIMB_DIGITS)
    return result

def from_int(n, xp=np):
    assert n >= 0
    limbs = []
    while True:
        n, limb = divmod(n, RADIX)
        limbs.append(limb)
        if not n:
            break
    return xp.asarray(limbs, dtype=xp.uint64)

def to_int(d):
    accum = 0
    for i in range(d.shape[0] - 1, -1, -1):
        accum *= RADIX
        accum += int(d[i])
    return accum
