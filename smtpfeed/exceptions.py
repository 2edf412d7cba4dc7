# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

from smtpfeed.api import SMTPFeedException


__all__ = [
    'ConfigurationError',
    'DeliveryError',
    'DestinationError',
    'InvalidReportError',
    'TransmissionError',
]


class ConfigurationError(SMTPFeedException):
    """Raised when a FeedReporter was created with missing or invalid feed
    settings."""

    def __init__(self, parameter=None, message=None):
        if message is None:
            message = 'invalid configuration'
        if parameter is not None:
            message = '%s: %s' % (parameter, message)
        super(ConfigurationError, self).__init__(message)
        self.parameter = parameter


class DestinationError(SMTPFeedException):
    """A single destination could not be resolved or no socket could be
    opened for it."""

    reason = 'unusable destination'

    def __init__(self, destination, cause=None, message=None):
        if message is None:
            message = '%s %s:%s' % (self.reason, destination[0], destination[1])
            if cause is not None:
                message = '%s (%s)' % (message, cause)
        super(DestinationError, self).__init__(message)
        self.destination = destination
        self.cause = cause


class TransmissionError(DestinationError):
    """The datagram could not be written to the destination's socket."""

    reason = 'unable to send report to'


class DeliveryError(SMTPFeedException):
    """Raised by FeedReporter.send() after all destinations were tried and at
    least one of them failed. 'failures' contains one DestinationError per
    failed destination."""

    def __init__(self, failures, nr_destinations):
        self.failures = list(failures)
        self.nr_destinations = nr_destinations
        self.nr_delivered = nr_destinations - len(self.failures)
        message = 'report delivery failed for %d of %d destination(s): %s' % (
            len(self.failures), nr_destinations,
            '; '.join([str(failure) for failure in self.failures]))
        super(DeliveryError, self).__init__(message)


class InvalidReportError(SMTPFeedException):
    """The received data is not a well-formed report or its checksum does not
    match."""
    pass

