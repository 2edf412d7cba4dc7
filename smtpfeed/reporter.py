# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

import logging
import time

from smtpfeed.exceptions import DeliveryError, DestinationError
from smtpfeed.report import build_packet, checksum_of, REPORT_FIELDS
from smtpfeed.transport import UDPTransport
from smtpfeed.validation import FEED_SETTINGS, validate_feed_configuration


__all__ = ['FeedReporter']

log = logging.getLogger(__name__)


class FeedReporter(object):
    """Send data about a single SMTP transaction to a transaction feed
    collector. The report is sent as one UDP datagram to every configured
    destination.

    feed_name identifies the feed to the collector, feed_key authenticates the
    report data against the feed_name. feed_dest contains one or more
    'host[:port]' entries (separated by comma, semicolon or whitespace), the
    port defaults to 12211. If multiple hosts are given, the report is sent to
    all of them.

    The observed transaction data is set via plain attributes (port,
    ip_address, reverse_dns, helo, used_esmtp, used_tls, used_auth,
    mail_from_domain) or as keyword arguments to the constructor. Values are
    not checked, the caller has to provide well-formed data. All attributes
    default to None which means 'unknown' and is reported as an empty value,
    e.g. an unset 'used_tls' is not the same as 'used_tls = False'.

    A reporter can be used for multiple send() calls, every report contains
    the values current at call time. The instance is not thread-safe: do not
    change any attributes while send() is running in another thread."""

    def __init__(self, feed_name, feed_key, feed_dest, transport=None, **fields):
        settings = validate_feed_configuration(feed_name, feed_key, feed_dest)
        self.feed_name = feed_name
        self.feed_key = feed_key
        self.feed_dest = feed_dest
        self._transport = transport
        self._destinations = settings['feed_dest']
        self._time = None

        for name in REPORT_FIELDS:
            setattr(self, name, None)
        if 'time' in fields:
            self.time = fields.pop('time')
        for name, value in fields.items():
            if name not in REPORT_FIELDS:
                msg = '%s() got an unexpected keyword argument %r'
                raise TypeError(msg % (self.__class__.__name__, name))
            setattr(self, name, value)

    @classmethod
    def from_config(cls, config, prefix='', transport=None):
        """Create a reporter from a mapping (e.g. a section of an ini file).
        The keys are the names of the feed settings with the given prefix
        (e.g. 'abusix_feed_name' for prefix='abusix_')."""
        settings = dict([(name, config.get(prefix + name)) for name in FEED_SETTINGS])
        return cls(transport=transport, **settings)

    # --------------------------------------------------------------------------
    # lazily computed state

    def time(self):
        """The unix timestamp of the transaction. If not set explicitly the
        current time is used when it is accessed for the first time and kept
        for all subsequent reports."""
        if self._time is None:
            self._time = int(time.time())
        return self._time

    def _set_time(self, value):
        self._time = value
    time = property(time, _set_time)

    def transport(self):
        if self._transport is None:
            self._transport = UDPTransport()
        return self._transport
    transport = property(transport)

    def resolve_destinations(self):
        """Return the list of Destinations ((host, port) tuples) in the order
        they were configured. The list is parsed once when the reporter is
        created, host names are only looked up by the transport when a report
        is sent."""
        return self._destinations

    # --------------------------------------------------------------------------
    # report

    def transaction_fields(self):
        return dict([(name, getattr(self, name)) for name in REPORT_FIELDS])

    def build_report(self, override_time=None):
        """Return the complete report (including the checksum line) as string.
        If given, override_time is used instead of the transaction time."""
        timestamp = override_time if (override_time is not None) else self.time
        return build_packet(self.feed_name, self.feed_key, timestamp,
                            self.transaction_fields())

    def checksum_of(self, packet):
        return checksum_of(packet, self.feed_key)

    def send(self):
        """Send the report to all destinations. Every destination is tried
        independently, a failing destination does not prevent delivery to the
        others. If at least one destination failed, a DeliveryError (containing
        all individual errors) is raised after all destinations were tried.
        There are no retries."""
        payload = self.build_report().encode('utf-8')
        destinations = self.resolve_destinations()
        failures = []
        for destination in destinations:
            try:
                self.transport.send_datagram(destination, payload)
            except DestinationError as e:
                log.warning('feed %s: %s', self.feed_name, e)
                failures.append(e)
            else:
                log.debug('feed %s: sent %d bytes to %s', self.feed_name,
                          len(payload), destination)
        if failures:
            raise DeliveryError(failures, nr_destinations=len(destinations))

    def close(self):
        if self._transport is not None:
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return '%s(%s, %s)' % (self.__class__.__name__, self.feed_name,
                               self.feed_dest)

