# listener.py - Binds the HTTP port and serves a Flask app in the background
import logging
import socket
import threading

from werkzeug.serving import get_sockaddr, make_server, select_address_family

logger = logging.getLogger(__name__)


class BindError(Exception):
    """The listening socket could not be bound (port in use, no permission, bad address)."""

    def __init__(self, host, port, reason):
        super().__init__(f"cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


class ServerHandle:
    """A running server started by :func:`start`."""

    def __init__(self, server, thread):
        self._server = server
        self._thread = thread
        self._stopped = False
        self.host = server.host
        self.port = server.port

    @property
    def url(self):
        return f"http://localhost:{self.port}"

    def wait(self, timeout=None):
        self._thread.join(timeout)

    def stop(self):
        if self._stopped:
            return
        self._stopped = True
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()


def start(app, port, host='0.0.0.0'):
    """Bind ``host:port`` and serve ``app`` from a daemon thread.

    Raises BindError if the socket cannot be bound; nothing is left running
    in that case.
    """
    try:
        family = select_address_family(host, port)
        sock = socket.create_server(get_sockaddr(host, port, family), family=family)
    except OSError as e:
        raise BindError(host, port, e.strerror or str(e)) from e

    # make_server dups the descriptor, so our copy is closed either way
    try:
        server = make_server(host, port, app, threaded=True, fd=sock.fileno())
    finally:
        sock.close()

    thread = threading.Thread(target=server.serve_forever, name=f"http-{server.port}", daemon=True)
    thread.start()

    handle = ServerHandle(server, thread)
    logger.info(f"Example app listening at {handle.url}")
    return handle
