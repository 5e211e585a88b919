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

from typing import TypeVar

from rated.method._base import Direction
from rated.method._base import UpdateMethod
from rated.util.math import in_range


T = TypeVar('T')


# ========================================================================= #
# Linear Update Method                                                      #
# ========================================================================= #


class UpdateMethodLinear(UpdateMethod[T]):
    """
    The most common update method, values live on an unbounded line
    and can move forever in both the positive and negative directions.
    - compare to `UpdateMethodLooped` where one end of a range leads to the other.
    """

    def _get_best_direction(self, value: T) -> Direction:
        # there is only one right direction, ties decrease
        if self.target_value > value:
            return Direction.INCREASING
        return Direction.DECREASING

    def _correct_value_target(self, result: T, original: T, direction: Direction) -> T:
        # revert to the target if we passed over it
        target = self.target_value
        if in_range(target, original, result):
            return target
        return result


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
