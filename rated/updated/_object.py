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

from typing import Generic
from typing import Iterator
from typing import List
from typing import TypeVar


O = TypeVar('O', bound='UpdatedObject')


# ========================================================================= #
# Updated Object                                                            #
# ========================================================================= #


class UpdatedObject(object):
    """
    Anything that needs to receive regular time updates.
    Updates are ignored while the object is paused.
    """

    def __init__(self):
        self._is_paused = False

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @is_paused.setter
    def is_paused(self, paused: bool):
        self._is_paused = bool(paused)

    def add_time(self, elapsed: float) -> None:
        """
        :param elapsed: Time that has passed since the last update (1.0 == 1 second)
        """
        if not self._is_paused:
            self._add_time(elapsed)

    def _add_time(self, elapsed: float) -> None:
        raise NotImplementedError


# ========================================================================= #
# Updated Object List                                                       #
# ========================================================================= #


class UpdatedObjectList(UpdatedObject, Generic[O]):
    """
    Update many `UpdatedObject`s in one shot. Items are compared by
    identity, never by equality, and each item can only be added once.
    - pausing the list pauses all of its items, but items
      can still be paused individually.
    """

    def __init__(self):
        super().__init__()
        self._items: List[O] = []

    def add(self, item: O) -> None:
        if not isinstance(item, UpdatedObject):
            raise TypeError(f'items in {self.__class__.__name__} must be instances of {UpdatedObject.__name__}, got: {repr(item)}')
        if not self.contains(item):
            self._items.append(item)

    def remove(self, item: O) -> None:
        # does nothing if the item is missing
        for i, existing in enumerate(self._items):
            if existing is item:
                del self._items[i]
                return

    def clear(self) -> None:
        self._items.clear()

    def contains(self, item: O) -> bool:
        return any(existing is item for existing in self._items)

    def __contains__(self, item: O) -> bool:
        return self.contains(item)

    def __getitem__(self, idx: int) -> O:
        return self._items[idx]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[O]:
        yield from self._items

    def _add_time(self, elapsed: float) -> None:
        for item in self._items:
            item.add_time(elapsed)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
