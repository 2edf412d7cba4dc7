# -*- coding: UTF-8 -*-
"Release information about smtpfeed."

name = 'smtpfeed'
version = '0.1.0'
description = 'send SMTP transaction data to a real-time transaction feed'
long_description = '''
smtpfeed reports data about SMTP transactions (connecting IP, reverse DNS,
HELO, ESMTP/TLS/AUTH usage, MAIL FROM domain) to a transaction feed collector.
Every report is sent as a single UDP datagram to one or more collectors and is
authenticated with a keyed checksum.

Changelog
******************************

0.1.0 (unreleased)
==================
- initial release: FeedReporter with UDP delivery to multiple destinations,
  pycerberus-based validation of the feed settings, debugging collector and
  test helpers
'''
author = 'smtpfeed contributors'
copyright = '2024 smtpfeed contributors'
license = 'MIT'

