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

import logging
from enum import Enum
from typing import Generic
from typing import TypeVar
from typing import Union

from rated.util.math import val_abs


log = logging.getLogger(__name__)


T = TypeVar('T')


# ========================================================================= #
# Direction                                                                 #
# ========================================================================= #


class Direction(Enum):
    """
    The two possible directions in which a value can change.
    """

    INCREASING = 'increasing'
    DECREASING = 'decreasing'

    @classmethod
    def from_any(cls, direction: Union['Direction', str]) -> 'Direction':
        if isinstance(direction, cls):
            return direction
        if isinstance(direction, str):
            try:
                return cls[direction.upper()]
            except KeyError as e:
                raise KeyError(f'invalid direction name: {repr(direction)}, must be one of: {[d.value for d in cls]}') from e
        raise TypeError(f'invalid direction: {repr(direction)}, must be a {cls.__name__} or one of: {[d.value for d in cls]}')

    @property
    def opposite(self) -> 'Direction':
        if self is Direction.INCREASING:
            return Direction.DECREASING
        return Direction.INCREASING


# ========================================================================= #
# Update Method                                                             #
# ========================================================================= #


class UpdateMethod(Generic[T]):
    """
    Decides how a value should respond to each update. Based on the rate,
    the value is moved on each update towards the target, which is either
    a specific value that is never overshot, or a constant direction that
    is followed forever.

    The target is given as a single argument, a `Direction` or its name means
    the target is a direction, anything else is treated as a target value.
    The kind of target can never change after construction, but the rate can.

    Subclasses must override `_get_best_direction` and can override the
    other hooks to normalise values or correct results:
      - `_normalize_value`
      - `_correct_value_target`
      - `_correct_direction_target`
    """

    def __init__(self, rate: T, target: Union[Direction, T]):
        # strings are always direction names, never values
        if isinstance(target, str):
            target = Direction.from_any(target)
        self._target = target
        self._rate = None
        self.set_rate(rate)

    def __repr__(self):
        return f'{self.__class__.__name__}(rate={repr(self._rate)}, target={repr(self._target)})'

    # --- RATE --- #

    def set_rate(self, rate: T) -> None:
        if rate < 0:
            log.warning(f'negative rate: {repr(rate)} given to {self.__class__.__name__}, using its magnitude instead')
        self._rate = val_abs(rate)

    def get_rate(self) -> T:
        return self._rate

    rate = property(get_rate, set_rate)

    # --- TARGET --- #

    @property
    def target(self) -> Union[Direction, T]:
        return self._target

    @property
    def has_target_value(self) -> bool:
        return not isinstance(self._target, Direction)

    @property
    def has_target_direction(self) -> bool:
        return isinstance(self._target, Direction)

    @property
    def target_value(self) -> T:
        if not self.has_target_value:
            raise TypeError(f'{self.__class__.__name__} has a direction target: {self._target}, not a value target')
        return self._target

    @property
    def target_direction(self) -> Direction:
        if not self.has_target_direction:
            raise TypeError(f'{self.__class__.__name__} has a value target: {repr(self._target)}, not a direction target')
        return self._target

    # --- UPDATES --- #

    def __call__(self, value: T, elapsed) -> T:
        return self.advance(value, elapsed)

    def advance(self, value: T, elapsed) -> T:
        """
        Compute the new value after some amount of time has elapsed.

        :param value: The current value, this is never modified
        :param elapsed: The time elapsed since the last update, this should
                        not be negative. (1.0 == 1 second)
        :return: The updated value
        """
        # make the value legal
        original = self._normalize_value(value)
        # values that have reached their target are held there
        if self.is_finished(original):
            return original
        # the amount of change to apply, always positive
        magnitude = self._rate * elapsed
        # get the direction to move in
        if self.has_target_value:
            direction = self._get_best_direction(original)
        else:
            direction = self._target
        # apply the change
        if direction is Direction.INCREASING:
            result = original + magnitude
        else:
            result = original - magnitude
        # correct the result
        if self.has_target_value:
            result = self._correct_value_target(result, original, direction)
            if self.is_finished(result):
                log.debug(f'{self.__class__.__name__} reached target value: {repr(self._target)}')
        else:
            result = self._correct_direction_target(result, original, direction)
        return result

    def is_finished(self, value: T) -> bool:
        """
        Check if this method has a target value AND it has been reached.
        Direction targets are never finished.
        """
        if self.has_target_direction:
            return False
        return value == self._target

    # --- OVERRIDABLE --- #

    def _normalize_value(self, value: T) -> T:
        return value

    def _get_best_direction(self, value: T) -> Direction:
        raise NotImplementedError

    def _correct_value_target(self, result: T, original: T, direction: Direction) -> T:
        return result

    def _correct_direction_target(self, result: T, original: T, direction: Direction) -> T:
        return result


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
