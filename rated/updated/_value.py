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
from typing import Any
from typing import Callable
from typing import Generic
from typing import Optional
from typing import TypeVar

from rated.method import UpdateMethod
from rated.updated._object import UpdatedObject


log = logging.getLogger(__name__)


T = TypeVar('T')


# ========================================================================= #
# Updated Value                                                             #
# ========================================================================= #


class UpdatedValue(UpdatedObject, Generic[T]):
    """
    An `UpdatedObject` that changes a single value over time using an
    `UpdateMethod`. Nothing happens until a method is set.
    - subclasses decide where the value lives by overriding
      `get_value` and `set_value`
    """

    def __init__(self, method: Optional[UpdateMethod[T]] = None):
        super().__init__()
        self._method = None
        if method is not None:
            self.method = method

    def get_value(self) -> T:
        raise NotImplementedError

    def set_value(self, value: T) -> None:
        raise NotImplementedError

    @property
    def value(self) -> T:
        return self.get_value()

    @value.setter
    def value(self, value: T):
        self.set_value(value)

    @property
    def method(self) -> Optional[UpdateMethod[T]]:
        return self._method

    @method.setter
    def method(self, method: Optional[UpdateMethod[T]]):
        """
        Set the method used to update the value, `None` detaches the current
        method. The value is immediately normalised by the new method, even
        if this object is paused.
        """
        if (method is not None) and (not isinstance(method, UpdateMethod)):
            raise TypeError(f'method must be an instance of {UpdateMethod.__name__} or None, got: {repr(method)}')
        self._method = method
        log.debug(f'{self.__class__.__name__} is now updated by: {repr(method)}')
        # adjust any invalid initial value
        self._add_time(0.0)

    @property
    def is_updating(self) -> bool:
        if self._method is None:
            return False
        return not self._method.is_finished(self.get_value())

    def _add_time(self, elapsed: float) -> None:
        if self.is_updating:
            self.set_value(self._method.advance(self.get_value(), elapsed))


# ========================================================================= #
# Implementations                                                           #
# ========================================================================= #


class UpdatedValueBasic(UpdatedValue[T]):
    """
    Stores and updates its own copy of the value.
    """

    def __init__(self, init_value: T, method: Optional[UpdateMethod[T]] = None):
        self._value = init_value
        super().__init__(method=method)

    def get_value(self) -> T:
        return self._value

    def set_value(self, value: T) -> None:
        self._value = value

    def __repr__(self):
        return f'{self.__class__.__name__}({repr(self._value)})'


class UpdatedValueRef(UpdatedValue[T]):
    """
    Updates a value that lives somewhere else, the value is
    read and written through the given getter and setter.
    """

    def __init__(self, getter: Callable[[], T], setter: Callable[[T], Any], method: Optional[UpdateMethod[T]] = None):
        assert callable(getter), f'getter must be callable, got: {repr(getter)}'
        assert callable(setter), f'setter must be callable, got: {repr(setter)}'
        self._getter = getter
        self._setter = setter
        super().__init__(method=method)

    @classmethod
    def from_attr(cls, obj: Any, name: str, method: Optional[UpdateMethod[T]] = None) -> 'UpdatedValueRef[T]':
        """Update the attribute `name` of `obj`"""
        return cls(
            getter=lambda: getattr(obj, name),
            setter=lambda value: setattr(obj, name, value),
            method=method,
        )

    @classmethod
    def from_item(cls, container: Any, key: Any, method: Optional[UpdateMethod[T]] = None) -> 'UpdatedValueRef[T]':
        """Update the item `container[key]`, eg. an entry in a dictionary or list"""
        def _setter(value):
            container[key] = value
        return cls(
            getter=lambda: container[key],
            setter=_setter,
            method=method,
        )

    def get_value(self) -> T:
        return self._getter()

    def set_value(self, value: T) -> None:
        self._setter(value)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
