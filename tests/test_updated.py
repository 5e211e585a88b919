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

import pytest

from rated.method import Direction
from rated.method import UpdateMethodLinear
from rated.method import UpdateMethodLooped
from rated.updated import UpdatedObject
from rated.updated import UpdatedObjectList
from rated.updated import UpdatedValue
from rated.updated import UpdatedValueBasic
from rated.updated import UpdatedValueRef


# ========================================================================= #
# TESTS - VALUES                                                            #
# ========================================================================= #


def test_abstract_objects():
    with pytest.raises(NotImplementedError):
        UpdatedObject().add_time(1.0)
    with pytest.raises(NotImplementedError):
        UpdatedValue().get_value()
    # paused objects never get updated
    obj = UpdatedObject()
    obj.is_paused = True
    obj.add_time(1.0)


def test_value_without_method():
    value = UpdatedValueBasic(1.0)
    assert value.method is None
    assert not value.is_updating
    value.add_time(50.0)
    assert value.value == 1.0
    value.value = 2.0
    assert value.get_value() == 2.0


def test_value_with_method():
    value = UpdatedValueBasic(1.0, method=UpdateMethodLinear(0.5, 10.0))
    assert value.is_updating
    value.add_time(3.0)
    assert value.value == 2.5
    value.add_time(1000.0)
    assert value.value == 10.0
    assert not value.is_updating
    value.add_time(1.0)
    assert value.value == 10.0
    # detach the method
    value.method = None
    assert not value.is_updating


def test_value_invalid_method():
    value = UpdatedValueBasic(1.0)
    with pytest.raises(TypeError, match='method must be an instance of'):
        value.method = 'linear'


def test_value_normalized_when_method_set():
    value = UpdatedValueBasic(450.0)
    value.method = UpdateMethodLooped(1.0, Direction.INCREASING, 0.0, 360.0)
    assert value.value == 90.0
    # even when paused
    value = UpdatedValueBasic(-90.0)
    value.is_paused = True
    value.method = UpdateMethodLooped(1.0, Direction.INCREASING, 0.0, 360.0)
    assert value.value == 270.0


def test_value_pause():
    method = UpdateMethodLinear(1.0, Direction.INCREASING)
    paused = UpdatedValueBasic(0.0, method=method)
    unpaused = UpdatedValueBasic(0.0, method=method)
    paused.is_paused = True
    assert paused.is_paused
    paused.add_time(5.0)
    assert paused.value == 0.0
    # unpausing and applying the same time gives the same result as never pausing
    paused.is_paused = False
    paused.add_time(5.0)
    unpaused.add_time(5.0)
    assert paused.value == unpaused.value == 5.0


def test_value_ref():
    class Ship:
        heading = 350.0
    ship = Ship()
    method = UpdateMethodLooped(5.0, 10.0, 0.0, 360.0)
    # attributes
    value = UpdatedValueRef.from_attr(ship, 'heading', method=method)
    value.add_time(1.0)
    assert ship.heading == 355.0
    assert value.value == 355.0
    # items
    speeds = {'left': 0, 'right': 0}
    value = UpdatedValueRef.from_item(speeds, 'right', method=UpdateMethodLinear(2, 5))
    value.add_time(1)
    assert speeds == {'left': 0, 'right': 2}
    # getter & setter
    store = [1.0]
    value = UpdatedValueRef(lambda: store[0], lambda v: store.__setitem__(0, v))
    value.method = UpdateMethodLinear(1.0, Direction.DECREASING)
    value.add_time(2.0)
    assert store == [-1.0]


# ========================================================================= #
# TESTS - LISTS                                                             #
# ========================================================================= #


def test_list_membership():
    a, b = UpdatedValueBasic(1.0), UpdatedValueBasic(1.0)
    items = UpdatedObjectList()
    items.add(a)
    items.add(a)
    assert len(items) == 1
    items.add(b)
    assert len(items) == 2
    assert items[0] is a
    assert items[1] is b
    assert list(items) == [a, b]
    assert a in items
    assert items.contains(b)
    # remove by identity, missing items are ignored
    items.remove(a)
    items.remove(a)
    assert list(items) == [b]
    assert a not in items
    items.clear()
    assert len(items) == 0
    # only updated objects can be added
    with pytest.raises(TypeError, match='must be instances of'):
        items.add(1.0)


def test_list_add_time():
    a = UpdatedValueBasic(0.0, method=UpdateMethodLinear(1.0, Direction.INCREASING))
    b = UpdatedValueBasic(0.0, method=UpdateMethodLinear(1.0, Direction.DECREASING))
    items = UpdatedObjectList()
    items.add(a)
    items.add(b)
    items.add_time(2.0)
    assert (a.value, b.value) == (2.0, -2.0)
    # pausing single items
    b.is_paused = True
    items.add_time(2.0)
    assert (a.value, b.value) == (4.0, -2.0)
    # pausing the list
    b.is_paused = False
    items.is_paused = True
    items.add_time(2.0)
    assert (a.value, b.value) == (4.0, -2.0)


def test_list_nested():
    a = UpdatedValueBasic(0, method=UpdateMethodLinear(1, 3))
    inner, outer = UpdatedObjectList(), UpdatedObjectList()
    inner.add(a)
    outer.add(inner)
    for i in range(5):
        outer.add_time(1)
    assert a.value == 3


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
