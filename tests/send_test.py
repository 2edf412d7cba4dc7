# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

from pythonic_testcase import *

from smtpfeed import DeliveryError, DestinationError, FeedReporter, TransmissionError
from smtpfeed.test_util import RecordingTransport, parse_report


class SendTest(PythonicTestCase):

    def setUp(self):
        super(SendTest, self).setUp()
        self.init()

    def init(self, feed_dest='a.example.com,b.example.com:999,c.example.com', **kwargs):
        self.transport = RecordingTransport(**kwargs)
        self.reporter = FeedReporter('testing_feed', 'this_is_a_secret', feed_dest,
                                     transport=self.transport, port=25,
                                     ip_address='1.2.3.4', used_esmtp=True)

    def test_sends_one_datagram_per_destination(self):
        self.reporter.send()
        assert_length(3, self.transport.sent)
        assert_equals(
            [('a.example.com', 12211), ('b.example.com', 999), ('c.example.com', 12211)],
            self.transport.destinations())

    def test_all_destinations_receive_identical_payload(self):
        self.reporter.send()
        payloads = self.transport.payloads()
        assert_equals(1, len(set(payloads)))
        expected = self.reporter.build_report().encode('utf-8')
        assert_equals(expected, payloads[0])

    def test_payload_is_valid_report(self):
        self.reporter.send()
        report = parse_report(self.transport.payloads()[0], 'this_is_a_secret')
        assert_equals('testing_feed', report.feed_name)
        assert_equals('25', report.port)
        assert_equals('1.2.3.4', report.ip_address)
        assert_equals('Y', report.used_esmtp)
        assert_equals('', report.used_tls)

    def test_duplicate_destinations_receive_the_report_twice(self):
        self.init(feed_dest='a.example.com, a.example.com')
        self.reporter.send()
        assert_length(2, self.transport.sent)

    def test_reporter_can_be_reused(self):
        self.reporter.send()
        self.reporter.used_tls = True
        self.reporter.send()
        first_report = parse_report(self.transport.payloads()[0])
        last_report = parse_report(self.transport.payloads()[-1], 'this_is_a_secret')
        assert_equals('', first_report.used_tls)
        assert_equals('Y', last_report.used_tls)
        assert_equals(first_report.timestamp, last_report.timestamp)
        assert_not_equals(first_report.checksum, last_report.checksum)

    def test_failing_destination_does_not_prevent_delivery_to_others(self):
        self.init(failing=[('b.example.com', 999)])
        e = assert_raises(DeliveryError, self.reporter.send)
        assert_equals(
            [('a.example.com', 12211), ('c.example.com', 12211)],
            self.transport.destinations())
        assert_length(1, e.failures)
        assert_equals(3, e.nr_destinations)
        assert_equals(2, e.nr_delivered)
        failure = e.failures[0]
        assert_true(isinstance(failure, TransmissionError))
        assert_equals(('b.example.com', 999), failure.destination)

    def test_reports_all_failed_destinations(self):
        self.init(failing=[('a.example.com', 12211), ('c.example.com', 12211)],
                  error_class=DestinationError)
        e = assert_raises(DeliveryError, self.reporter.send)
        assert_equals(
            [('a.example.com', 12211), ('c.example.com', 12211)],
            [failure.destination for failure in e.failures])
        assert_equals(1, e.nr_delivered)
        assert_contains('a.example.com:12211', str(e))

    def test_close_closes_transport(self):
        with self.reporter:
            self.reporter.send()
        assert_true(self.transport.closed)

