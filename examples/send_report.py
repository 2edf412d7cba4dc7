#!/usr/bin/env python
# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT
"""Send a single example report (the same transaction which is used in the
documentation) to the given destination(s)."""

import logging
import os
import sys

from smtpfeed import DeliveryError, FeedReporter


def print_usage():
    cmd_name = os.path.basename(sys.argv[0] or __file__)
    print('Usage: %s <feed_dest> [feed_name] [feed_key]' % cmd_name)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(0)
    logging.basicConfig(level=logging.DEBUG)

    feed_dest = sys.argv[1]
    feed_name = sys.argv[2] if len(sys.argv) > 2 else 'testing_feed'
    feed_key = sys.argv[3] if len(sys.argv) > 3 else 'this_is_a_secret'

    with FeedReporter(feed_name, feed_key, feed_dest) as reporter:
        reporter.port = 25
        reporter.ip_address = '1.2.3.4'
        reporter.reverse_dns = 'test.example.org'
        reporter.helo = 'server.example.org'
        reporter.used_esmtp = True
        reporter.used_tls = True
        reporter.used_auth = False
        reporter.mail_from_domain = 'from.example.org'
        try:
            reporter.send()
        except DeliveryError as e:
            print(e)
            sys.exit(1)

