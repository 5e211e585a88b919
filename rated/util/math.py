#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2021 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.

from typing import Tuple
from typing import TypeVar


"""
Generic numeric helpers used by the update methods.

Nothing is assumed about the values passed to these functions except
that they are ordered and support the arithmetic operators used below,
so that ints, floats, fractions and numpy scalars are all valid inputs.
"""


T = TypeVar('T')


# ========================================================================= #
# min / max                                                                 #
# ========================================================================= #


def val_max(first: T, second: T) -> T:
    if first > second:
        return first
    return second


def val_min(first: T, second: T) -> T:
    if first <= second:
        return first
    return second


def val_min_max(first: T, second: T) -> Tuple[T, T]:
    """Return the pair `(min, max)` of the two values, order is unimportant"""
    if first <= second:
        return first, second
    return second, first


# ========================================================================= #
# magnitudes                                                                #
# ========================================================================= #


def val_abs(value: T) -> T:
    if value < 0:
        return value * -1
    return value


def val_dist(first: T, second: T) -> T:
    """Linear distance between two values, always non-negative"""
    return val_max(first, second) - val_min(first, second)


# ========================================================================= #
# ranges                                                                    #
# ========================================================================= #


def in_range(value: T, first: T, second: T) -> bool:
    """
    Check if a value lies between two bounds, inclusive.
    - the order of the bounds is unimportant
    """
    return (value <= val_max(first, second)) and (value >= val_min(first, second))


def clamp_to_range(value: T, first: T, second: T) -> T:
    """
    Push a value that lies outside of the range back
    onto the nearest bound, otherwise return it unchanged.
    - the order of the bounds is unimportant
    """
    lo, hi = val_min_max(first, second)
    if value > hi:
        return hi
    elif value < lo:
        return lo
    return value


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
