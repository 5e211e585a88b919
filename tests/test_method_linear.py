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

from fractions import Fraction

import pytest

from rated.method import Direction
from rated.method import UpdateMethod
from rated.method import UpdateMethodLinear


# ========================================================================= #
# TESTS - DIRECTION                                                         #
# ========================================================================= #


def test_direction_from_any():
    assert Direction.from_any(Direction.INCREASING) is Direction.INCREASING
    assert Direction.from_any('increasing') is Direction.INCREASING
    assert Direction.from_any('Decreasing') is Direction.DECREASING
    assert Direction.INCREASING.opposite is Direction.DECREASING
    assert Direction.DECREASING.opposite is Direction.INCREASING
    with pytest.raises(KeyError, match="must be one of: \['increasing', 'decreasing'\]"):
        Direction.from_any('sideways')
    with pytest.raises(TypeError, match='invalid direction'):
        Direction.from_any(1)


# ========================================================================= #
# TESTS - BASE                                                              #
# ========================================================================= #


def test_base_method_requires_best_direction():
    method = UpdateMethod(1.0, 5.0)
    with pytest.raises(NotImplementedError):
        method.advance(0.0, 1.0)
    # direction targets never need the best direction
    method = UpdateMethod(1.0, Direction.INCREASING)
    assert method.advance(0.0, 1.0) == 1.0


def test_rate_is_magnitude():
    method = UpdateMethodLinear(-2.0, Direction.INCREASING)
    assert method.rate == 2.0
    assert method.get_rate() == 2.0
    method.set_rate(-3)
    assert method.rate == 3
    method.rate = 0.5
    assert method.rate == 0.5
    # rate changes are used by the next update
    assert method.advance(1.0, 2.0) == 2.0


def test_target_accessors():
    method = UpdateMethodLinear(1.0, Direction.DECREASING)
    assert method.has_target_direction
    assert not method.has_target_value
    assert method.target is Direction.DECREASING
    assert method.target_direction is Direction.DECREASING
    with pytest.raises(TypeError, match='not a value target'):
        method.target_value
    # value targets
    method = UpdateMethodLinear(1.0, 5.0)
    assert method.has_target_value
    assert not method.has_target_direction
    assert method.target == 5.0
    assert method.target_value == 5.0
    with pytest.raises(TypeError, match='not a direction target'):
        method.target_direction


def test_target_direction_names():
    # strings are never treated as target values
    method = UpdateMethodLinear(1.0, 'decreasing')
    assert method.has_target_direction
    assert method.target is Direction.DECREASING
    assert method.advance(0.0, 1.0) == -1.0
    with pytest.raises(KeyError, match='invalid direction name'):
        UpdateMethodLinear(1.0, 'sideways')


# ========================================================================= #
# TESTS - LINEAR                                                            #
# ========================================================================= #


@pytest.mark.parametrize('value', [-10, 0, 3.5])
@pytest.mark.parametrize('rate', [0, 0.5, 2])
@pytest.mark.parametrize('elapsed', [0, 1, 3.0])
def test_linear_direction(value, rate, elapsed):
    increaser = UpdateMethodLinear(rate, Direction.INCREASING)
    decreaser = UpdateMethodLinear(rate, Direction.DECREASING)
    assert increaser.advance(value, elapsed) == value + rate * elapsed
    assert decreaser.advance(value, elapsed) == value - rate * elapsed
    assert increaser(value, elapsed) == increaser.advance(value, elapsed)
    # directions are never finished
    assert not increaser.is_finished(value)
    assert not decreaser.is_finished(value + rate * elapsed)


def test_linear_value_target():
    method = UpdateMethodLinear(0.5, 10.0)
    value = 1.0
    values = []
    for i in range(8):
        value = method.advance(value, 3.0)
        values.append(value)
    assert values == [2.5, 4.0, 5.5, 7.0, 8.5, 10.0, 10.0, 10.0]
    assert method.is_finished(value)
    assert not method.is_finished(8.5)


def test_linear_value_target_decreasing():
    method = UpdateMethodLinear(3, 0)
    value = 10
    values = []
    for i in range(5):
        value = method.advance(value, 1)
        values.append(value)
    assert values == [7, 4, 1, 0, 0]


def test_linear_overshoot_snap():
    method = UpdateMethodLinear(5.0, 10.0)
    assert method.advance(9.0, 1.0) == 10.0
    assert method.advance(11.0, 1.0) == 10.0
    assert method.advance(-100.0, 1000.0) == 10.0


def test_linear_idempotent_at_target():
    method = UpdateMethodLinear(5.0, 10.0)
    for elapsed in [0.0, 0.5, 1.0, 1000.0]:
        assert method.advance(10.0, elapsed) == 10.0
        assert method.is_finished(method.advance(10.0, elapsed))


def test_linear_best_direction_ties_decrease():
    method = UpdateMethodLinear(1.0, 5.0)
    assert method._get_best_direction(4.0) is Direction.INCREASING
    assert method._get_best_direction(6.0) is Direction.DECREASING
    assert method._get_best_direction(5.0) is Direction.DECREASING


def test_linear_generic_types():
    # integers
    method = UpdateMethodLinear(2, 5)
    assert [method.advance(v, 1) for v in (0, 2, 4)] == [2, 4, 5]
    # fractions converge exactly
    method = UpdateMethodLinear(Fraction(1, 3), Fraction(1))
    value = Fraction(0)
    for i in range(3):
        value = method.advance(value, Fraction(1))
    assert value == Fraction(1)
    assert method.is_finished(value)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
