# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import ssl
import requests  # type: ignore

logger = logging.getLogger(__name__)


# Only connecting is bounded. Receive requests are held open by the service for up to the
# queue client timeout, so no read timeout is applied.
HTTP_CONNECT_TIMEOUT = 10


class HTTPTransport(object):
    """
    A wrapper class that provides an implementation-agnostic HTTP interface.

    A single requests Session is used for the life of the transport, so connections to the
    queue are reused across requests.
    """

    def __init__(
        self,
        server_verification_cert=None,
        proxy_options=None,
    ):
        """
        Constructor to instantiate an HTTP protocol wrapper.

        :param str server_verification_cert: Certificate which can be used to validate a server-side TLS connection (optional).
        :param proxy_options: Options for sending traffic through proxy servers.
        """
        self._server_verification_cert = server_verification_cert
        self._proxies = format_proxies(proxy_options)
        self._http_adapter = self._create_http_adapter()
        self._session = requests.Session()
        self._session.mount("https://", self._http_adapter)

    def _create_http_adapter(self):
        """
        This method creates a custom HTTPAdapter for use with a requests library session.
        It will allow for use of a custom configured SSL context.
        """
        ssl_context = self._create_ssl_context()

        class CustomSSLContextHTTPAdapter(requests.adapters.HTTPAdapter):
            def init_poolmanager(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().init_poolmanager(*args, **kwargs)

            def proxy_manager_for(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().proxy_manager_for(*args, **kwargs)

        return CustomSSLContextHTTPAdapter()

    def _create_ssl_context(self):
        """
        This method creates the SSLContext object used to authenticate the connection.
        """
        logger.debug("creating a SSL context")
        ssl_context = ssl.SSLContext(protocol=ssl.PROTOCOL_TLS_CLIENT)
        ssl_context.minimum_version = ssl.TLSVersion.TLSv1_2

        if self._server_verification_cert:
            ssl_context.load_verify_locations(cadata=self._server_verification_cert)
        else:
            ssl_context.load_default_certs()

        ssl_context.verify_mode = ssl.CERT_REQUIRED
        ssl_context.check_hostname = True

        return ssl_context

    def send(self, request):
        """
        Send a prepared request and return the response without reading its body.

        The caller owns the response and must close it.

        :param request: The request to send
        :type request: :class:`requests.PreparedRequest`
        :returns: :class:`requests.Response`
        :raises: requests.exceptions.RequestException if the request could not be completed
        """
        logger.debug("sending https {} request to {}".format(request.method, request.url))
        # Note that TLS options are not set here due to them being set via the HTTPAdapter
        # that was mounted at session level.
        return self._session.send(
            request,
            stream=True,
            proxies=self._proxies,
            timeout=(HTTP_CONNECT_TIMEOUT, None),
        )

    def close(self):
        """Close the underlying session and any pooled connections"""
        self._session.close()


def format_proxies(proxy_options):
    """
    Format the data from the proxy_options object into a format for use with the requests library
    """
    proxies = {}
    if proxy_options:
        # Basic address/port formatting
        proxy = "{address}:{port}".format(
            address=proxy_options.proxy_address, port=proxy_options.proxy_port
        )
        # Add credentials if necessary
        if proxy_options.proxy_username and proxy_options.proxy_password:
            auth = "{username}:{password}".format(
                username=proxy_options.proxy_username, password=proxy_options.proxy_password
            )
            proxy = auth + "@" + proxy
        # Set proxy for use on HTTP or HTTPS connections
        if proxy_options.proxy_type == "HTTP":
            proxies["http"] = "http://" + proxy
            proxies["https"] = "http://" + proxy
        elif proxy_options.proxy_type == "SOCKS4":
            proxies["http"] = "socks4://" + proxy
            proxies["https"] = "socks4://" + proxy
        elif proxy_options.proxy_type == "SOCKS5":
            proxies["http"] = "socks5://" + proxy
            proxies["https"] = "socks5://" + proxy
        else:
            # This should be unreachable due to validation on the ProxyOptions object
            raise ValueError("Invalid proxy type: {}".format(proxy_options.proxy_type))

    return proxies
