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

"""
The registry only contains concrete update methods, the
abstract `UpdateMethod` base class can never be registered.
  - for creating your own methods, extend `rated.method.UpdateMethod`

*NB* The built-in methods are lazily imported!

You can register your own methods using the provided decorator:
eg. `METHODS.register(aliases='spin')(YourUpdateMethod)`
"""

from rated.registry._registry import MethodRegistry
from rated.registry._registry import check_method_cls


# ========================================================================= #
# METHODS - should be synchronized with: `rated/method/__init__.py`        #
# ========================================================================= #


METHODS = MethodRegistry('METHODS')
METHODS.register_import('rated.method._linear.UpdateMethodLinear', aliases='linear', auto_alias=False)
METHODS.register_import('rated.method._looped.UpdateMethodLooped', aliases='looped', auto_alias=False)


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
