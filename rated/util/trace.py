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

import numpy as np

from rated.method import UpdateMethod


# ========================================================================= #
# Trajectories                                                              #
# ========================================================================= #


def trace_values(
    method: UpdateMethod,
    value,
    elapsed,
    steps: int,
    stop_when_finished: bool = False,
) -> np.ndarray:
    """
    Repeatedly apply the same elapsed time to a value.

    :param method: The update method used on every step
    :param value: The starting value
    :param elapsed: The time elapsed on every step (1.0 == 1 second)
    :param steps: The maximum number of steps to apply
    :param stop_when_finished: End the trajectory early at the first value
                               for which the method is finished
    :return: Array with the starting value followed by the value after
             each step, of length `steps + 1` unless stopped early.
    """
    assert steps >= 0, f'steps must be non-negative, got: {repr(steps)}'
    values = [value]
    for _ in range(steps):
        if stop_when_finished and method.is_finished(value):
            break
        value = method.advance(value, elapsed)
        values.append(value)
    return np.asarray(values)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
