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

"""
PyAttitude - Euler Angle, Quaternion and Direction Cosine Conversions

A Python library converting an attitude between Euler angles under any of
the twelve rotation sequences, left transformation quaternions and
transformation matrices, with deterministic handling of gimbal lock.
"""

__version__ = "1.0.0"
__author__ = "PyAttitude Development Team"
__title__ = "pyattitude"
__description__ = "Euler angle, quaternion and direction cosine matrix conversions"

from .core import *
from .attitude import *
