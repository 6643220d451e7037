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
Diagnostic messages for the attitude conversions.

Conversions do not raise on an invalid rotation sequence. They report the
problem through a ``MessageHandler`` and return without touching their
outputs. The default handler forwards messages to the standard ``logging``
module; callers can pass their own handler per call or install one
process-wide with ``set_message_handler``.
"""

import logging
import threading
from typing import Optional

from ..logger import LogLevel

logger = logging.getLogger(__name__)

__all__ = [
    'OrientationMessages', 'MessageHandler',
    'get_message_handler', 'set_message_handler',
]


class OrientationMessages:
    """Message category tags used by the orientation conversions"""
    invalid_enum = "pyattitude/orientation/invalid_enum"
    invalid_quaternion = "pyattitude/orientation/invalid_quaternion"


class MessageHandler:
    """
    Diagnostic sink.

    ``error``, ``warn``, ``inform`` and ``debug`` format the message with
    printf-style arguments and pass it to ``process_message``. Override
    ``process_message`` to capture or redirect diagnostics.

    Parameters
    ----------
    logger_name : str, optional
        Name of the logger receiving the messages. Defaults to this
        module's logger.
    """

    def __init__(self, logger_name: Optional[str] = None):
        self.logger = logging.getLogger(logger_name) if logger_name else logger

    def error(self, location: str, category: str, fmt: str, *args):
        self.send(LogLevel.ERROR, location, category, fmt, *args)

    def warn(self, location: str, category: str, fmt: str, *args):
        self.send(LogLevel.WARNING, location, category, fmt, *args)

    def inform(self, location: str, category: str, fmt: str, *args):
        self.send(LogLevel.INFO, location, category, fmt, *args)

    def debug(self, location: str, category: str, fmt: str, *args):
        self.send(LogLevel.DEBUG, location, category, fmt, *args)

    def send(self, severity: LogLevel, location: str, category: str, fmt: str, *args):
        """Format a message and dispatch it"""
        message = fmt % args if args else fmt
        self.process_message(severity, location, category, message)

    def process_message(self, severity: LogLevel, location: str, category: str, message: str):
        """Emit a formatted message. The default implementation logs it."""
        self.logger.log(severity.value, "%s: [%s] %s", location, category, message)


_default_handler = MessageHandler()
_handler_lock = threading.Lock()


def get_message_handler() -> MessageHandler:
    """Get the process-wide default message handler"""
    return _default_handler


def set_message_handler(handler: Optional[MessageHandler]) -> MessageHandler:
    """
    Install a process-wide default message handler.

    Parameters
    ----------
    handler : MessageHandler or None
        New default handler; None restores a logging handler.

    Returns
    -------
    MessageHandler
        The previously installed handler
    """
    global _default_handler
    with _handler_lock:
        previous = _default_handler
        _default_handler = handler if handler is not None else MessageHandler()
    return previous
