# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

import re

from pycerberus.errors import InvalidDataError
from pycerberus.i18n import _
from pycerberus.schema import SchemaValidator
from pycerberus.validators import StringValidator

from smtpfeed.exceptions import ConfigurationError
from smtpfeed.model import DEFAULT_FEED_PORT, Destination


__all__ = [
    'DestinationListValidator',
    'FEED_SETTINGS',
    'FeedConfigurationSchema',
    'validate_feed_configuration',
]

FEED_SETTINGS = ('feed_name', 'feed_key', 'feed_dest')

# ------------------------------------------------------------------------------
# feed destinations

class DestinationListValidator(StringValidator):
    """Parses a list of 'host[:port]' entries (delimited by comma, semicolon or
    whitespace) into Destinations. The order is preserved and duplicates are
    kept. IPv6 addresses must use brackets if a port is given
    ('[2001:db8::1]:1234')."""

    separator_pattern = r'[,;\s]+'

    def messages(self):
        return {
            'no_destinations': _('No destination configured.'),
            'invalid_destination': _('Invalid destination "%(destination)s".'),
            'invalid_port': _('Invalid port "%(port)s" for destination "%(destination)s".'),
        }

    def convert(self, value, context):
        string_value = super(DestinationListValidator, self).convert(value, context)
        destinations = []
        for token in re.split(self.separator_pattern, string_value):
            if token == '':
                continue
            destinations.append(self._parse_destination(token, value, context))
        if len(destinations) == 0:
            self.raise_error('no_destinations', value, context)
        return destinations

    def _parse_destination(self, token, value, context):
        match = re.search(r'^\[([^\]]+)\](?::(.*))?$', token)
        if match is not None:
            host, port_string = match.group(1), match.group(2)
        else:
            host, separator, port_string = token.partition(':')
        if host == '':
            self.raise_error('invalid_destination', value, context, destination=token)
        if not port_string:
            return Destination(host, DEFAULT_FEED_PORT)
        if (not port_string.isdigit()) or not (1 <= int(port_string) <= 65535):
            self.raise_error('invalid_port', value, context, port=port_string,
                             destination=token)
        return Destination(host, int(port_string))

# ------------------------------------------------------------------------------

class FeedConfigurationSchema(SchemaValidator):
    feed_name = StringValidator()
    feed_key  = StringValidator()
    feed_dest = DestinationListValidator()


def validate_feed_configuration(feed_name, feed_key, feed_dest):
    """Check the feed identity and return the validated settings (feed_dest
    parsed into a list of Destinations). Raises a ConfigurationError for the
    first invalid (or missing) setting."""
    settings = dict(feed_name=feed_name, feed_key=feed_key, feed_dest=feed_dest)
    try:
        return FeedConfigurationSchema().process(settings)
    except InvalidDataError as e:
        errors = e.error_dict()
        parameter = [name for name in FEED_SETTINGS if name in errors][0]
        message = errors[parameter].msg()
        raise ConfigurationError(parameter, message) from e

