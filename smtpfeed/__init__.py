# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

from .api import IDatagramTransport, SMTPFeedException
from .exceptions import (ConfigurationError, DeliveryError, DestinationError,
    TransmissionError)
from .model import DEFAULT_FEED_PORT, Destination
from .reporter import FeedReporter
from .transport import UDPTransport

__all__ = [
    'ConfigurationError',
    'DEFAULT_FEED_PORT',
    'DeliveryError',
    'Destination',
    'DestinationError',
    'FeedReporter',
    'IDatagramTransport',
    'SMTPFeedException',
    'TransmissionError',
    'UDPTransport',
]
