from rated import Direction
from rated.factory import UpdateMethodCfg
from rated.factory import make_update_method
from rated.registry import METHODS

# methods can be constructed from configs using their name in the registry
print(f'available methods: {sorted(METHODS)}')
method = make_update_method(UpdateMethodCfg(method='looped', rate=45.0, target=270.0, min_value=0.0, max_value=360.0))
print(method)
assert method.advance(0.0, 1.0) == 315.0

# plain dictionaries work too, direction names are converted automatically
method = make_update_method(dict(method='linear', rate=2, target='decreasing'))
assert method.target_direction is Direction.DECREASING
assert method.advance(0, 3) == -6
