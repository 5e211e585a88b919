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

from typing import Optional
from typing import TypeVar
from typing import Union

from rated.method._base import Direction
from rated.method._base import UpdateMethod
from rated.util.math import clamp_to_range
from rated.util.math import in_range
from rated.util.math import val_dist
from rated.util.math import val_max
from rated.util.math import val_min


T = TypeVar('T')


# ========================================================================= #
# Looped Update Method                                                      #
# ========================================================================= #


class UpdateMethodLooped(UpdateMethod[T]):
    """
    Update method for values that wrap around, such as rotations where 0
    degrees comes after 360 and vice versa. Values that pass one end of
    the range `[min_value, max_value]` re-enter from the other end.

    With a value target, the shortest route to the target is taken unless
    a `direction_override` is given, in which case the value always moves
    in that direction, which may or may not be the shortest route.
    """

    def __init__(
        self,
        rate: T,
        target: Union[Direction, T],
        min_value: T,
        max_value: T,
        direction_override: Optional[Direction] = None,
    ):
        """
        :param rate: The rate of change, only the magnitude is used
        :param target: The constant direction to travel in, or the value to try and reach
        :param min_value: The minimum of the looping range
        :param max_value: The maximum of the looping range
        :param direction_override: The direction to always travel in when the target is a value
        """
        if not (min_value < max_value):
            raise ValueError(f'the looped range is invalid, min_value: {repr(min_value)} must be less than max_value: {repr(max_value)}')
        self._min = min_value
        self._max = max_value
        super().__init__(rate=rate, target=target)
        # check the target
        if self.has_target_value:
            if not in_range(target, min_value, max_value):
                raise ValueError(f'target value: {repr(target)} can never be reached, it is outside of the looped range: [{repr(min_value)}, {repr(max_value)}]')
        elif direction_override is not None:
            raise ValueError(f'direction_override: {direction_override} can only be used with a value target, got direction target: {target}')
        # check the override
        if (direction_override is not None) and (not isinstance(direction_override, Direction)):
            raise TypeError(f'direction_override must be a {Direction.__name__}, got: {repr(direction_override)}')
        self._override = direction_override

    def __repr__(self):
        return f'{self.__class__.__name__}(rate={repr(self.rate)}, target={repr(self.target)}, min_value={repr(self._min)}, max_value={repr(self._max)}, direction_override={self._override})'

    @property
    def min(self) -> T:
        return self._min

    @property
    def max(self) -> T:
        return self._max

    @property
    def is_override_enabled(self) -> bool:
        return self._override is not None

    @property
    def direction_override(self) -> Optional[Direction]:
        return self._override

    # --- OVERRIDES --- #

    def _normalize_value(self, value: T) -> T:
        # loop around, passing the other bound by the same amount this one was passed
        if value > self._max:
            value = self._min + (value - self._max)
        elif value < self._min:
            value = self._max + (value - self._min)
        # values more than a full range away are pushed onto the closest bound
        return clamp_to_range(value, self._min, self._max)

    def _get_best_direction(self, value: T) -> Direction:
        if self._override is not None:
            return self._override
        target = self.target_value
        # distance without looping, and distance when looping over the bounds
        forward_dist = val_dist(value, target)
        backward_dist = val_dist(val_min(value, target), self._min) + val_dist(val_max(value, target), self._max)
        # ties take the direct route
        direct = Direction.INCREASING if (value <= target) else Direction.DECREASING
        if forward_dist <= backward_dist:
            return direct
        return direct.opposite

    def _correct_value_target(self, result: T, original: T, direction: Direction) -> T:
        target = self.target_value
        # still inside the range, the target was passed only if
        # it lies between the original value and the result
        if in_range(result, self._min, self._max):
            if in_range(target, original, result):
                return target
            return result
        # the result passed a bound and needs to loop to the other bound
        if result > self._max:
            exited, marker = self._max, self._min
        else:
            exited, marker = self._min, self._max
        # passed before looping
        if in_range(target, original, exited):
            return target
        # passed after looping
        result = self._normalize_value(result)
        if in_range(target, result, marker):
            return target
        return result

    def _correct_direction_target(self, result: T, original: T, direction: Direction) -> T:
        return self._normalize_value(result)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
