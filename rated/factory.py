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
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from pprint import pformat
from typing import Any
from typing import Dict
from typing import Optional
from typing import Union

from rated import registry
from rated.method import Direction
from rated.method import UpdateMethod
from rated.method import UpdateMethodLooped


log = logging.getLogger(__name__)


# ========================================================================= #
# Config                                                                    #
# ========================================================================= #


@dataclass
class UpdateMethodCfg(object):
    # name in the registry, eg. `linear` OR the path to a method eg. `rated.method.UpdateMethodLinear`
    method: str = 'linear'
    rate: Any = 1.0
    # a value to reach, or the name of a direction eg. `increasing`
    target: Any = 'increasing'
    # only used by looped methods
    min_value: Optional[Any] = None
    max_value: Optional[Any] = None
    direction_override: Optional[str] = None

    def get_keys(self) -> list:
        return list(self.to_dict().keys())

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self):
        return pformat(self.to_dict(), sort_dicts=False)


# ========================================================================= #
# Factory                                                                   #
# ========================================================================= #


def _normalise_cfg(cfg: Union[UpdateMethodCfg, Dict[str, Any]]) -> UpdateMethodCfg:
    if isinstance(cfg, UpdateMethodCfg):
        return cfg
    if not isinstance(cfg, dict):
        raise TypeError(f'invalid config type, got: {type(cfg)}, must be a {UpdateMethodCfg.__name__} or a dict')
    valid_keys = {f.name for f in fields(UpdateMethodCfg)}
    invalid_keys = set(cfg.keys()) - valid_keys
    if invalid_keys:
        raise ValueError(f'invalid config keys: {sorted(invalid_keys)}, valid keys are: {sorted(valid_keys)}')
    missing_keys = valid_keys - set(cfg.keys())
    if missing_keys:
        log.info(f'config values not specified, using defaults for: {sorted(missing_keys)}')
    return UpdateMethodCfg(**cfg)


def make_update_method(cfg: Union[UpdateMethodCfg, Dict[str, Any]]) -> UpdateMethod:
    """
    Construct an update method from a config.

    The method is looked up in `rated.registry.METHODS` before trying
    to import it. Direction names are converted to `Direction` instances,
    and the range of looped methods must be given with `min_value` and `max_value`.
    """
    cfg = _normalise_cfg(cfg)
    method_cls = registry.METHODS.resolve(cfg.method)
    # get the arguments
    kwargs = dict(rate=cfg.rate, target=cfg.target)
    if issubclass(method_cls, UpdateMethodLooped):
        if (cfg.min_value is None) or (cfg.max_value is None):
            raise ValueError(f'looped method: {repr(cfg.method)} requires both `min_value` and `max_value`, got: {repr(cfg.min_value)} and {repr(cfg.max_value)}')
        kwargs.update(min_value=cfg.min_value, max_value=cfg.max_value)
        if cfg.direction_override is not None:
            kwargs.update(direction_override=Direction.from_any(cfg.direction_override))
    elif (cfg.min_value is not None) or (cfg.max_value is not None) or (cfg.direction_override is not None):
        raise ValueError(f'method: {repr(cfg.method)} is not looped and does not support `min_value`, `max_value` or `direction_override`')
    # instantiate
    method = method_cls(**kwargs)
    log.debug(f'made update method: {repr(method)} from config:\n{cfg}')
    return method


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
