# -*- coding: UTF-8 -*-
# SPDX-License-Identifier: MIT

import logging
import socket

from smtpfeed.api import IDatagramTransport
from smtpfeed.exceptions import DestinationError, TransmissionError


__all__ = ['UDPTransport']

log = logging.getLogger(__name__)


class UDPTransport(IDatagramTransport):
    """Sends every report as a single UDP datagram. There is one connected
    socket per destination which is opened on first use and kept until
    close() is called. Writes are non-blocking and no answer is expected."""

    def __init__(self):
        self._sockets = {}

    def _open_socket(self, destination):
        host, port = destination
        try:
            addresses = socket.getaddrinfo(host, port, 0, socket.SOCK_DGRAM)
        except (socket.gaierror, UnicodeError) as e:
            # UnicodeError: host name is not IDNA encodable (e.g. empty label)
            raise DestinationError(destination, e) from e
        family, socktype, proto, canonname, sockaddr = addresses[0]
        udp_socket = None
        try:
            udp_socket = socket.socket(family, socktype, proto)
            udp_socket.setblocking(False)
            udp_socket.connect(sockaddr)
        except OSError as e:
            if udp_socket is not None:
                udp_socket.close()
            raise DestinationError(destination, e) from e
        log.debug('opened UDP socket for %s (%s)', destination, sockaddr[0])
        return udp_socket

    def _socket_for(self, destination):
        udp_socket = self._sockets.get(destination)
        if udp_socket is None:
            udp_socket = self._open_socket(destination)
            self._sockets[destination] = udp_socket
        return udp_socket

    def send_datagram(self, destination, payload):
        udp_socket = self._socket_for(destination)
        try:
            udp_socket.send(payload)
        except OSError as e:
            raise TransmissionError(destination, e) from e

    def close(self):
        sockets = list(self._sockets.values())
        self._sockets = {}
        for udp_socket in sockets:
            udp_socket.close()

