# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the user-facing synchronous client for Azure Service Bus queues.
"""
import logging
import threading
from typing import Any, Optional
import requests  # type: ignore
from . import http_path, http_request, http_response, http_transport
from . import connection_string as cs
from .config import QueueClientConfig
from .custom_typing import HTTPClient
from .exceptions import ClientError, SasTokenError
from .models import Message
from .sastoken import SasTokenGenerator
from .signing_mechanism import SymmetricKeySigningMechanism

logger = logging.getLogger(__name__)


def _validate_kwargs(**kwargs: Any) -> None:
    """Helper function to validate user provided kwargs.
    Raises TypeError if an invalid option has been provided"""
    valid_kwargs = [
        "proxy_options",
        "server_verification_cert",
        "product_info",
        "http_client",
        "logger",
    ]

    for kwarg in kwargs:
        if kwarg not in valid_kwargs:
            raise TypeError("Unsupported keyword argument: '{}'".format(kwarg))


class QueueClient(object):
    """Thread-safe synchronous client for an Azure Service Bus queue.

    Every operation performs exactly one HTTPS request and blocks until the service responds.
    Nothing is retried.
    """

    def __init__(self, config: QueueClientConfig) -> None:
        """Initializer for a QueueClient.

        :param config: The configuration of the client
        :type config: :class:`azure.sbqueue.QueueClientConfig`
        """
        self._config = config
        self._token_generator = SasTokenGenerator(
            signing_mechanism=SymmetricKeySigningMechanism(config.key_value),
            key_name=config.key_name,
        )
        # The default transport is created on first use
        self._http_client_lock = threading.Lock()
        self._http_client: Optional[HTTPClient] = None

    @classmethod
    def create_from_connection_string(
        cls,
        connection_string: str,
        queue_name: Optional[str] = None,
        timeout: int = 60,
        **kwargs: Any
    ) -> "QueueClient":
        """
        Instantiate the client from a Service Bus connection string, e.g.
        Endpoint=sb://<namespace>.servicebus.windows.net/;SharedAccessKeyName=<name>;SharedAccessKey=<key>

        :param str connection_string: The connection string for the namespace or queue
        :param str queue_name: The name of the queue. Required unless the connection string
            contains an EntityPath.
        :param int timeout: Number of seconds the service waits for a message to arrive on receive

        :param proxy_options: Options for sending traffic through proxy servers.
        :type proxy_options: :class:`azure.sbqueue.ProxyOptions`
        :param str server_verification_cert: Configuration Option. The trusted certificate chain.
        :param str product_info: Configuration Option. Default is empty string. The string
            contains arbitrary product info which is appended to the user agent string.
        :param http_client: Object used to send requests in place of the default HTTP transport.
        :param logger: Sink for the debug and error messages of response parsing.

        :raises: ValueError if given an invalid connection_string, or no queue name.
        :raises: TypeError if given an unsupported parameter.

        :returns: An instance of a QueueClient.
        """
        _validate_kwargs(**kwargs)

        connection_string = cs.ConnectionString(connection_string)
        if queue_name is None:
            queue_name = connection_string.get(cs.ENTITY_PATH)
        if not queue_name:
            raise ValueError("No queue name provided, and the connection string has no EntityPath")

        config = QueueClientConfig(
            namespace=connection_string.namespace,
            domain=connection_string.domain,
            key_name=connection_string[cs.SHARED_ACCESS_KEY_NAME],
            key_value=connection_string[cs.SHARED_ACCESS_KEY],
            queue_name=queue_name,
            timeout=timeout,
            **kwargs
        )
        return cls(config)

    def __enter__(self) -> "QueueClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()

    @property
    def config(self) -> QueueClientConfig:
        return self._config

    def receive_message(self) -> Message:
        """Atomically retrieve and lock the message at the head of the queue (peek-lock).

        The message is not delivered to other receivers while the lock is held. To complete
        processing, call .delete_message() with the received message. To abandon processing,
        call .unlock_message(), or let the lock expire.

        See https://docs.microsoft.com/en-us/rest/api/servicebus/peek-lock-message-non-destructive-read

        :returns: The received Message, including its lock token.

        :raises: :class:`azure.sbqueue.exceptions.NoMessagesAvailableError` if no message
            arrived within the configured timeout.
        :raises: :class:`azure.sbqueue.exceptions.ServiceError` subclass if the service
            returned any other failure status.
        :raises: :class:`azure.sbqueue.exceptions.ClientError` if the request could not be
            created or sent, or the response could not be read.
        """
        logger.info("Receiving message from queue...")

        request = self._create_request(http_path.get_receive_path(self._config.timeout), "POST")
        response = self._send(request)
        try:
            http_response.handle_status_code(response)
            message = http_response.parse_message(response, self._config.logger)
        finally:
            response.close()

        logger.info("Received message from queue")
        return message

    def send_message(self, message: Message) -> None:
        """Send a message to the queue.

        Nothing assigned by the service (such as the sequence number) is returned.

        :param message: The message to send.
        :type message: :class:`azure.sbqueue.Message`

        :raises: :class:`azure.sbqueue.exceptions.ServiceError` subclass if the service
            returned a failure status.
        :raises: :class:`azure.sbqueue.exceptions.ClientError` if the request could not be
            created or sent.
        """
        logger.info("Sending message to queue...")

        request = self._create_request_from_message(http_path.get_send_path(), "POST", message)
        self._complete(request)

        logger.info("Successfully sent message to queue")

    def unlock_message(self, message: Message) -> None:
        """Unlock a peek-locked message, making it available to other receivers again.

        See https://docs.microsoft.com/en-us/rest/api/servicebus/unlock-message

        :param message: A message previously returned by .receive_message()
        :type message: :class:`azure.sbqueue.Message`

        :raises: :class:`azure.sbqueue.exceptions.MessageNotFoundError` if the message or its
            lock does not exist.
        :raises: :class:`azure.sbqueue.exceptions.ServiceError` subclass if the service
            returned any other failure status.
        :raises: :class:`azure.sbqueue.exceptions.ClientError` if the request could not be
            created or sent.
        """
        logger.info("Unlocking message...")

        request = self._create_request(_get_lock_path(message), "PUT")
        self._complete(request)

        logger.info("Successfully unlocked message")

    def delete_message(self, message: Message) -> None:
        """Complete processing of a peek-locked message, deleting it from the queue.

        Only call this after successfully processing a message returned by .receive_message(),
        in order to maintain At-Least-Once delivery assurances.

        See https://docs.microsoft.com/en-us/rest/api/servicebus/delete-message

        :param message: A message previously returned by .receive_message()
        :type message: :class:`azure.sbqueue.Message`

        :raises: :class:`azure.sbqueue.exceptions.MessageNotFoundError` if the message or its
            lock does not exist.
        :raises: :class:`azure.sbqueue.exceptions.ServiceError` subclass if the service
            returned any other failure status.
        :raises: :class:`azure.sbqueue.exceptions.ClientError` if the request could not be
            created or sent.
        """
        logger.info("Deleting message...")

        request = self._create_request(_get_lock_path(message), "DELETE")
        self._complete(request)

        logger.info("Successfully deleted message")

    def shutdown(self) -> None:
        """Release the connections of the default HTTP transport, if one was created.

        The client can still be used afterwards; a new transport is created when needed.
        A transport override provided in the config is left untouched.
        """
        with self._http_client_lock:
            http_client, self._http_client = self._http_client, None
        if http_client is not None:
            logger.debug("Closing HTTP transport")
            http_client.close()

    def _create_request(self, sub_path, method):
        try:
            return http_request.build_request(
                self._config, self._token_generator, sub_path, method
            )
        except (requests.exceptions.RequestException, SasTokenError, ValueError) as e:
            raise ClientError("Request create failed") from e

    def _create_request_from_message(self, sub_path, method, message):
        try:
            return http_request.build_request_from_message(
                self._config, self._token_generator, sub_path, method, message
            )
        except (requests.exceptions.RequestException, SasTokenError, ValueError) as e:
            raise ClientError("Request create failed") from e

    def _send(self, request):
        http_client = self._get_http_client()
        try:
            return http_client.send(request)
        except (requests.exceptions.RequestException, OSError) as e:
            raise ClientError("Sending {} request failed".format(request.method)) from e

    def _complete(self, request):
        """Send a request whose response carries nothing but its status"""
        response = self._send(request)
        try:
            http_response.handle_status_code(response)
        finally:
            response.close()

    def _get_http_client(self):
        """Return the transport override from the config if there is one, otherwise the
        client's own default transport, creating it if this is the first request"""
        if self._config.http_client is not None:
            return self._config.http_client

        if self._http_client is not None:
            return self._http_client

        with self._http_client_lock:
            if self._http_client is None:
                logger.debug("Creating HTTP transport")
                self._http_client = http_transport.HTTPTransport(
                    server_verification_cert=self._config.server_verification_cert,
                    proxy_options=self._config.proxy_options,
                )
            return self._http_client


def _get_lock_path(message):
    # A message that was never received has no lock, which the service reports as not found
    return http_path.get_message_lock_path(message.message_id or "", message.lock_token or "")
