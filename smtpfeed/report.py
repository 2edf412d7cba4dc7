# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT
"""Serialization of a single SMTP transaction into the feed's wire format.

A report consists of exactly twelve lines separated by '\\n' (no trailing
newline):

    feed name, unix timestamp, port, ip address, reverse dns, helo,
    esmtp used (Y/N), tls used (Y/N), auth used (Y/N), mail from domain,
    extended json (reserved, always empty), checksum

Unset values are sent as empty lines. The checksum is the hex encoded MD5 of
all previous lines (joined by '\\n'), a newline and the feed key. Please note
that this is only a simple keyed hash to identify the feed, it is not a MAC
which resists length-extension attacks or forgery. The collector expects
exactly this construction so it can not be changed to something stronger.
"""

import hashlib


__all__ = ['build_packet', 'checksum_of', 'render_tristate', 'REPORT_FIELDS']

# observed transaction fields in the order they appear on the wire
REPORT_FIELDS = (
    'port',
    'ip_address',
    'reverse_dns',
    'helo',
    'used_esmtp',
    'used_tls',
    'used_auth',
    'mail_from_domain',
)

TRISTATE_FIELDS = ('used_esmtp', 'used_tls', 'used_auth')


def render_tristate(value):
    """Return 'Y'/'N' for a set flag and an empty string for None (unknown).
    An unknown value must never be reported as 'N'."""
    if value is None:
        return ''
    return 'Y' if value else 'N'


def render_value(value):
    if value is None:
        return ''
    return '%s' % value


def checksum_of(packet, key):
    data = '\n'.join((packet, key)).encode('utf-8')
    return hashlib.md5(data).hexdigest()


def build_packet(feed_name, feed_key, timestamp, fields):
    """Return the complete report (checksum line included) as a string.
    'fields' maps the names in REPORT_FIELDS to their values, missing names
    are treated as unset."""
    lines = [feed_name, '%d' % timestamp]
    for name in REPORT_FIELDS:
        value = fields.get(name)
        if name in TRISTATE_FIELDS:
            lines.append(render_tristate(value))
        else:
            lines.append(render_value(value))
    # extended json: reserved for future use, always empty
    lines.append('')
    packet = '\n'.join(lines)
    return '\n'.join((packet, checksum_of(packet, feed_key)))

