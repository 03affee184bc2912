# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import socks
from typing import Optional
from . import constant
from .custom_typing import HTTPClient, LogSink

PROXY_TYPES = ("HTTP", "SOCKS4", "SOCKS5")
socks_constant_to_string_map = {socks.HTTP: "HTTP", socks.SOCKS4: "SOCKS4", socks.SOCKS5: "SOCKS5"}


class ProxyOptions:
    """
    A class containing various options to send traffic through proxy servers by enabling
    proxying of the HTTPS connection to the queue.
    """

    def __init__(
        self,
        proxy_type: str,
        proxy_address: str,
        proxy_port: Optional[int] = None,
        proxy_username: Optional[str] = None,
        proxy_password: Optional[str] = None,
    ):
        """
        Initializer for proxy options.
        :param str proxy_type: The type of the proxy server. This can be one of three possible choices: "HTTP", "SOCKS4", or "SOCKS5"
        :param str proxy_address: IP address or DNS name of proxy server
        :param int proxy_port: The port of the proxy server. Defaults to 1080 for socks and 8080 for http.
        :param str proxy_username: (optional) username for the proxy server.
         If it is not provided, authentication will not be used (servers may accept unauthenticated requests).
        :param str proxy_password: (optional) password for the proxy server. Only used along with a username.
        """
        self._proxy_type = _format_proxy_type(proxy_type)
        self._proxy_address = proxy_address
        if proxy_port is None:
            self._proxy_port = _derive_default_proxy_port(self._proxy_type)
        else:
            self._proxy_port = int(proxy_port)
        self._proxy_username = proxy_username
        self._proxy_password = proxy_password

    @property
    def proxy_type(self):
        return self._proxy_type

    @property
    def proxy_address(self):
        return self._proxy_address

    @property
    def proxy_port(self):
        return self._proxy_port

    @property
    def proxy_username(self):
        return self._proxy_username

    @property
    def proxy_password(self):
        return self._proxy_password


class QueueClientConfig:
    """
    Class for storing the configuration of a QueueClient.

    All values are read-only once the config has been created.
    """

    def __init__(
        self,
        *,
        namespace: str,
        key_name: str,
        key_value: str,
        queue_name: str,
        timeout: int = 60,
        domain: str = constant.DEFAULT_DOMAIN,
        proxy_options: Optional[ProxyOptions] = None,
        server_verification_cert: Optional[str] = None,
        product_info: str = "",
        http_client: Optional[HTTPClient] = None,
        logger: Optional[LogSink] = None,
    ) -> None:
        """Initializer for QueueClientConfig

        :param str namespace: The Service Bus namespace, e.g. 'mynamespace' for
            https://mynamespace.servicebus.windows.net
        :param str key_name: Shared access policy name, e.g. 'RootManageSharedAccessKey'
        :param str key_value: Shared access policy key
        :param str queue_name: The name of the queue
        :param int timeout: Number of seconds the service waits for a message to arrive on receive
        :param str domain: The cloud domain of the namespace (default 'windows.net')
        :param proxy_options: Details of proxy configuration
        :type proxy_options: :class:`azure.sbqueue.ProxyOptions`
        :param str server_verification_cert: PEM certificate(s) trusted for the TLS connection,
            in place of the default trust store
        :param str product_info: Custom identification string appended to the User-Agent
        :param http_client: Object used to send requests in place of the default HTTP transport.
            Must provide .send(prepared_request) returning a response, as requests.Session does
        :param logger: Sink for the debug and error messages of response parsing. Defaults to
            the library's module logger
        :type logger: :class:`logging.Logger` or compatible

        :raises: ValueError if a required value is empty or the timeout is negative
        :raises: TypeError if the timeout is not an integer
        """
        self._namespace = _sanitize_required("namespace", namespace)
        self._key_name = _sanitize_required("key_name", key_name)
        self._key_value = _sanitize_required("key_value", key_value)
        self._queue_name = _sanitize_required("queue_name", queue_name)
        self._timeout = _sanitize_timeout(timeout)
        self._domain = _sanitize_required("domain", domain)
        self._proxy_options = proxy_options
        self._server_verification_cert = server_verification_cert
        self._product_info = product_info
        self._http_client = http_client
        self._logger = logger

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def key_name(self) -> str:
        return self._key_name

    @property
    def key_value(self) -> str:
        return self._key_value

    @property
    def queue_name(self) -> str:
        return self._queue_name

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def proxy_options(self) -> Optional[ProxyOptions]:
        return self._proxy_options

    @property
    def server_verification_cert(self) -> Optional[str]:
        return self._server_verification_cert

    @property
    def product_info(self) -> str:
        return self._product_info

    @property
    def http_client(self) -> Optional[HTTPClient]:
        return self._http_client

    @property
    def logger(self) -> Optional[LogSink]:
        return self._logger

    def __repr__(self):
        # Never include the key value
        return "QueueClientConfig(namespace={!r}, queue_name={!r}, key_name={!r}, timeout={!r})".format(
            self._namespace, self._queue_name, self._key_name, self._timeout
        )


# Sanitization #


def _format_proxy_type(proxy_type):
    """Returns the string format of a proxy type"""
    if proxy_type in PROXY_TYPES:
        return proxy_type
    # Allow the socks library constants to be used as well
    try:
        return socks_constant_to_string_map[proxy_type]
    except (KeyError, TypeError):
        raise ValueError("Invalid Proxy Type")


def _derive_default_proxy_port(proxy_type):
    if proxy_type == "HTTP":
        return 8080
    else:
        return 1080


def _sanitize_required(name, value):
    if not value:
        raise ValueError("'{}' must be provided".format(name))
    return value


def _sanitize_timeout(timeout):
    if isinstance(timeout, bool) or not isinstance(timeout, int):
        raise TypeError("Invalid type for 'timeout'. Must be an integer number of seconds.")

    if timeout < 0:
        raise ValueError("'timeout' cannot be negative")

    return timeout
