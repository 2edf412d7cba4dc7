# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

from pythonic_testcase import *

from smtpfeed import FeedReporter
from smtpfeed.exceptions import InvalidReportError
from smtpfeed.test_util import (CollectorThread, DebuggingCollector, parse_report,
    RecordingTransport)


class ParseReportTest(PythonicTestCase):

    def setUp(self):
        super(ParseReportTest, self).setUp()
        reporter = FeedReporter('testing_feed', 'this_is_a_secret', 'localhost',
                                port=25, helo='server.example.org', used_auth=False)
        self.packet = reporter.build_report(override_time=1000000000)

    def test_can_parse_report(self):
        report = parse_report(self.packet)
        assert_equals('testing_feed', report.feed_name)
        assert_equals('1000000000', report.timestamp)
        assert_equals('25', report.port)
        assert_equals('', report.ip_address)
        assert_equals('server.example.org', report.helo)
        assert_equals('N', report.used_auth)
        assert_equals(self.packet.rsplit('\n', 1)[1], report.checksum)

    def test_can_parse_bytes(self):
        report = parse_report(self.packet.encode('utf-8'), 'this_is_a_secret')
        assert_equals('testing_feed', report.feed_name)

    def test_rejects_wrong_feed_key(self):
        assert_raises(InvalidReportError, lambda: parse_report(self.packet, 'wrong_key'))

    def test_rejects_modified_report(self):
        packet = self.packet.replace('server.example.org', 'evil.example.org')
        assert_raises(InvalidReportError, lambda: parse_report(packet, 'this_is_a_secret'))

    def test_rejects_wrong_number_of_lines(self):
        assert_raises(InvalidReportError, lambda: parse_report(self.packet + '\n'))
        assert_raises(InvalidReportError, lambda: parse_report('foo\nbar'))


class RecordingTransportTest(PythonicTestCase):

    def test_stores_datagrams(self):
        transport = RecordingTransport()
        transport.send_datagram(('localhost', 12211), b'foo')
        assert_equals([(('localhost', 12211), b'foo')], transport.sent)
        assert_false(transport.closed)
        transport.close()
        assert_true(transport.closed)


class DebuggingCollectorTest(PythonicTestCase):

    def test_can_close_collector_which_was_never_served(self):
        collector = DebuggingCollector()
        assert_not_equals(0, collector.listen_port)
        collector.close()
        assert_equals(-1, collector._socket.fileno())

    def test_serve_forever_closes_socket_after_shutdown(self):
        collector = DebuggingCollector()
        thread = CollectorThread(collector)
        thread.start()
        thread.stop()
        assert_false(thread.is_alive())
        assert_equals(-1, collector._socket.fileno())

