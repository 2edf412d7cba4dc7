# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

from collections import namedtuple


__all__ = ['DEFAULT_FEED_PORT', 'Destination', 'ReceivedReport']

DEFAULT_FEED_PORT = 12211


class Destination(namedtuple('Destination', ['host', 'port'])):
    """A single collector endpoint. Compares equal to a plain (host, port)
    tuple."""
    __slots__ = ()

    def __str__(self):
        if ':' in self.host:
            return '[%s]:%s' % (self.host, self.port)
        return '%s:%s' % (self.host, self.port)


class ReceivedReport(object):
    """The decoded contents of a single feed packet. All fields are kept as
    the strings found in the packet (an empty string means 'not set')."""

    def __init__(self, feed_name, timestamp, port, ip_address, reverse_dns,
                 helo, used_esmtp, used_tls, used_auth, mail_from_domain,
                 extended_json, checksum):
        self.feed_name = feed_name
        self.timestamp = timestamp
        self.port = port
        self.ip_address = ip_address
        self.reverse_dns = reverse_dns
        self.helo = helo
        self.used_esmtp = used_esmtp
        self.used_tls = used_tls
        self.used_auth = used_auth
        self.mail_from_domain = mail_from_domain
        self.extended_json = extended_json
        self.checksum = checksum

    def __repr__(self):
        return '%s(%s, %s, %s)' % (self.__class__.__name__, self.feed_name,
                                   self.timestamp, self.ip_address)

