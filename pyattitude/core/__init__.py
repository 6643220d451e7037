# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Core module.

Shared building blocks for the attitude conversions:

- **Constants**: axis indices, angle constants and the numerical thresholds
  (gimbal lock detection, orthonormality tolerance)
- **Messages**: the diagnostic message handler through which conversions
  report invalid input instead of raising

Example Usage:
    >>> from pyattitude.core import GIMBAL_LOCK_THRESHOLD, MessageHandler
    >>> handler = MessageHandler()
    >>> handler.error("example", "demo", "value=%d", 42)
"""

from .constants import *
from .messages import *
