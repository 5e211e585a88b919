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

from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple
from typing import Type
from typing import Union

from rated.method import UpdateMethod
from rated.util.imports import import_obj
from rated.util.imports import split_import_path


AliasesHint = Union[str, Tuple[str, ...]]


# ========================================================================= #
# Registry Entries                                                          #
# ========================================================================= #


def check_method_cls(method_cls, name: str) -> Type[UpdateMethod]:
    if not (isinstance(method_cls, type) and issubclass(method_cls, UpdateMethod)):
        raise TypeError(f'method: {repr(name)} must be a subclass of {UpdateMethod.__name__}, got: {repr(method_cls)}')
    if method_cls is UpdateMethod:
        raise TypeError(f'method: {repr(name)} cannot be the abstract {UpdateMethod.__name__} base class')
    return method_cls


class _MethodEntry(object):
    """
    A registered method class, or the import path to one.
    Import paths are only resolved and checked on first use,
    after which the class is cached and shared by all aliases.
    """

    def __init__(self, method: Union[str, Type[UpdateMethod]]):
        if isinstance(method, str):
            self._import_path, self._method_cls = method, None
        else:
            self._import_path, self._method_cls = None, check_method_cls(method, name=getattr(method, '__name__', method))

    @property
    def is_loaded(self) -> bool:
        return self._method_cls is not None

    def get(self) -> Type[UpdateMethod]:
        if self._method_cls is None:
            self._method_cls = check_method_cls(import_obj(self._import_path), name=self._import_path)
        return self._method_cls

    def __repr__(self):
        if self._import_path is not None:
            return f'{self.__class__.__name__}({repr(self._import_path)})'
        return f'{self.__class__.__name__}({self._method_cls.__name__})'


# ========================================================================= #
# Method Registry                                                           #
# ========================================================================= #


class MethodRegistry(object):
    """
    Named update methods that can be looked up by configs.
    - every value is a concrete subclass of `UpdateMethod`
    - entries can have many aliases, but can never be overwritten or removed
    """

    def __init__(self, name: str):
        if not str.isidentifier(name):
            raise ValueError(f'registry names must be valid identifiers, got: {repr(name)}')
        self._name = name
        self._entries: Dict[str, _MethodEntry] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def examples(self) -> List[str]:
        return list(self._entries.keys())

    def __repr__(self):
        return f'{self.__class__.__name__}({self._name})'

    # --- LOOKUP --- #

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        yield from self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, name: str) -> Type[UpdateMethod]:
        if name not in self._entries:
            raise KeyError(f'method: {repr(name)} is not in registry: {repr(self._name)}, valid names are: {sorted(self._entries)}')
        return self._entries[name].get()

    def resolve(self, method: str) -> Type[UpdateMethod]:
        """
        Get a method class from a registered name, or
        fall back to importing it from a path.
        """
        if not isinstance(method, str):
            raise TypeError(f'invalid method: {repr(method)}, must be a `str`')
        if method in self:
            return self[method]
        try:
            method_cls = import_obj(method)
        except (ImportError, ValueError) as e:
            raise KeyError(f'invalid method: {repr(method)}, valid methods are: {sorted(self._entries)}, or an import path to a method, eg. `rated.method.UpdateMethodLinear`') from e
        return check_method_cls(method_cls, name=method)

    # --- REGISTRATION --- #

    def register(self, aliases: Optional[AliasesHint] = None, auto_alias: bool = True):
        """
        Decorator that adds a method class to this registry under
        its class name and any extra aliases. The class is checked now.
        """
        def _decorator(method_cls):
            auto = getattr(method_cls, '__name__', None) if auto_alias else None
            self._add(_MethodEntry(method_cls), self._get_keys(aliases, auto))
            return method_cls
        return _decorator

    def register_import(self, import_path: str, aliases: Optional[AliasesHint] = None, auto_alias: bool = True) -> None:
        """
        Add a method class by its import path, the import is
        only performed and checked when the method is first used.
        """
        (*_, auto) = split_import_path(import_path)
        self._add(_MethodEntry(import_path), self._get_keys(aliases, auto if auto_alias else None))

    def _get_keys(self, aliases: Optional[AliasesHint], auto: Optional[str]) -> Tuple[str, ...]:
        if aliases is None:
            aliases = ()
        elif isinstance(aliases, str):
            aliases = (aliases,)
        if not isinstance(aliases, tuple):
            raise TypeError(f'aliases for registry: {repr(self._name)} must be a str or Tuple[str], got: {repr(aliases)}')
        # the automatic alias is skipped if it is already taken and there are alternatives
        if (auto is not None) and not (auto in self and aliases):
            aliases = (auto, *aliases)
        if not aliases:
            raise ValueError(f'at least one alias must be given to registry: {repr(self._name)}')
        return aliases

    def _add(self, entry: _MethodEntry, keys: Tuple[str, ...]) -> None:
        # check all the keys before adding any of them
        for k in keys:
            if not str.isidentifier(k):
                raise ValueError(f'keys in registry: {repr(self._name)} must be valid identifiers, got: {repr(k)}')
            if k in self._entries:
                raise RuntimeError(f'tried to overwrite existing key: {repr(k)} in registry: {repr(self._name)}')
        for k in keys:
            self._entries[k] = entry


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
