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

import importlib
from typing import Tuple


# ========================================================================= #
# Import Paths                                                              #
# ========================================================================= #


def split_import_path(import_path: str) -> Tuple[str, ...]:
    """
    Split a dotted path like `rated.method.UpdateMethodLinear` into its
    parts, each of which must be a python identifier.
    """
    if not isinstance(import_path, str):
        raise TypeError(f'import path must be a `str`, got: {repr(import_path)}')
    parts = tuple(import_path.split('.'))
    if not all(part.isidentifier() for part in parts):
        raise ValueError(f'import path is invalid: {repr(import_path)}')
    return parts


def import_obj(import_path: str):
    """
    Import the attribute at the end of a dotted path, eg. a class from a module.
    """
    (*module_parts, attr_name) = split_import_path(import_path)
    if not module_parts:
        raise ValueError(f'import path must name both a module and an attribute, got: {repr(import_path)}')
    module_path = '.'.join(module_parts)
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ImportError(f'failed to import module: {repr(module_path)} for path: {repr(import_path)}') from e
    if not hasattr(module, attr_name):
        raise ImportError(f'failed to get attribute: {repr(attr_name)} from module: {repr(module_path)}')
    return getattr(module, attr_name)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
