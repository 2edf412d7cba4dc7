#!/usr/bin/env python
# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT
"""This module contains a very simple transaction feed collector which just
prints all received reports to STDOUT and discards them afterwards."""

import os
import queue
import sys

from smtpfeed.exceptions import InvalidReportError
from smtpfeed.test_util import CollectorThread, DebuggingCollector, parse_report


def list_get(data, index, default=None):
    if len(data) <= index:
        return default
    return data[index]


def print_usage():
    cmd_name = list_get(sys.argv, 0, default=os.path.basename(__file__))
    print('Usage: %s [host] [port] [feed_key]' % cmd_name)


def print_report(data, address, feed_key):
    print('---------- REPORT FROM %s:%s ----------' % address[:2])
    print(data.decode('utf-8', 'replace'))
    if feed_key is not None:
        try:
            parse_report(data, feed_key)
        except InvalidReportError as e:
            print('INVALID: %s' % e)
        else:
            print('checksum ok')
    print('------------- END REPORT -------------')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(0)

    host = list_get(sys.argv, 1, default='localhost')
    port = int(list_get(sys.argv, 2, default=12211))
    feed_key = list_get(sys.argv, 3)

    collector = DebuggingCollector(host, port)
    thread = CollectorThread(collector)
    thread.start()
    try:
        while True:
            try:
                data, address = collector.received_packets.get(timeout=1)
            except queue.Empty:
                continue
            print_report(data, address, feed_key)
    except KeyboardInterrupt:
        pass
    thread.stop()

