# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT
"""This module contains the interfaces which you can implement to customize
how smtpfeed delivers its reports. Everything in here is considered part of the
public API which should be as stable as possible."""

__all__ = ['IDatagramTransport', 'SMTPFeedException']


class IDatagramTransport(object):
    """Transports take care of getting a finished report to a single
    destination. The transport must not wait for any kind of response (the
    collector never sends one) and it must not retry.

    There is one transport instance per FeedReporter so the transport does not
    have to be thread-safe."""

    def send_datagram(self, destination, payload):
        """Send the payload (bytes) as a single datagram to the given
        destination (a Destination, that is a (host, port) tuple).

        Raise a DestinationError if the destination could not be resolved or
        no socket could be opened for it, a TransmissionError if the actual
        write failed."""
        raise NotImplementedError

    def close(self):
        """Release all resources (e.g. sockets) held by this transport. The
        transport may be used again afterwards."""
        pass


class SMTPFeedException(Exception):
    """Base class for all exceptions used in smtpfeed."""
    pass

