from rated import Direction
from rated import UpdatedObjectList
from rated import UpdatedValueBasic
from rated import UpdatedValueRef
from rated import UpdateMethodLinear


class Counter:
    number = 1.0

# values are normally updated from some sort of loop, here
# fake updates are applied manually so the results are predictable.
# - UpdatedValueBasic stores its own copy of the value
# - UpdatedValueRef changes a value that lives somewhere else, here `Counter.number`
counter = Counter()
basic_updater = UpdatedValueBasic(1.0)
ref_updater = UpdatedValueRef.from_attr(counter, 'number')

# a list updates everything at once, but nothing changes until methods are set
update_list = UpdatedObjectList()
update_list.add(basic_updater)
update_list.add(ref_updater)
update_list.add_time(50.0)
assert basic_updater.value == 1.0
assert counter.number == 1.0

# increase both values forever with a rate of 0.5
increaser = UpdateMethodLinear(0.5, Direction.INCREASING)
basic_updater.method = increaser
ref_updater.method = increaser
update_list.add_time(5.0)
print(f'increasing: {basic_updater.value} {counter.number}')
assert basic_updater.value == counter.number == 3.5

# only decrease the referenced value
ref_updater.method = UpdateMethodLinear(0.5, Direction.DECREASING)
update_list.add_time(5.0)
print(f'increasing & decreasing: {basic_updater.value} {counter.number}')
assert (basic_updater.value, counter.number) == (6.0, 1.0)

# move both values towards 10.0 with a faster rate, they never pass the target
changer = UpdateMethodLinear(1.0, 10.0)
basic_updater.method = changer
ref_updater.method = changer
for i in range(3):
    update_list.add_time(3.0)
    print(f'targeting 10.0: {basic_updater.value} {counter.number}')
assert basic_updater.value == counter.number == 10.0
assert not basic_updater.is_updating

# paused values ignore updates
ref_updater.method = increaser
ref_updater.is_paused = True
update_list.add_time(3.0)
assert counter.number == 10.0
