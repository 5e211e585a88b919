from rated import Direction
from rated import UpdatedValueBasic
from rated import UpdateMethodLooped
from rated.util.trace import trace_values

# looped methods handle rotations, where 0 degrees comes after 360 degrees.
# - the shortest route to 10 degrees from 350 degrees is to increase past 360
method = UpdateMethodLooped(5.0, 10.0, min_value=0.0, max_value=360.0)
angles = trace_values(method, 350.0, elapsed=1.0, steps=10, stop_when_finished=True)
print(f'shortest route: {angles.tolist()}')
assert angles.tolist() == [350.0, 355.0, 360.0, 5.0, 10.0]

# the direction can be forced, even when it is not the shortest route
method = UpdateMethodLooped(100.0, 10.0, min_value=0.0, max_value=360.0, direction_override=Direction.DECREASING)
angles = trace_values(method, 350.0, elapsed=1.0, steps=10, stop_when_finished=True)
print(f'forced route: {angles.tolist()}')
assert angles.tolist() == [350.0, 250.0, 150.0, 50.0, 10.0]

# constant directions loop forever
spinner = UpdatedValueBasic(0.0, method=UpdateMethodLooped(90.0, Direction.DECREASING, min_value=0.0, max_value=360.0))
for i in range(3):
    spinner.add_time(1.0)
    print(f'spinning: {spinner.value}')
assert spinner.value == 90.0
