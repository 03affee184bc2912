# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module interprets the HTTP responses returned by a Service Bus queue."""

import logging
import requests  # type: ignore
from . import constant, service_errors
from .exceptions import ClientError
from .models import Message, BrokerProperties
from .models.broker_properties import parse_rfc2616_datetime

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = (200, 201)


def handle_status_code(response):
    """
    Raise the error matching the status code of a response, if it is not a success.

    :param response: The response to check
    :type response: :class:`requests.Response`
    :raises: :class:`azure.sbqueue.exceptions.ServiceError` subclass for any status other
        than 200 or 201. If the error body can't be read, the error carries an empty body
    """
    if response.status_code in SUCCESS_STATUS_CODES:
        return

    try:
        body = response.text
    except (requests.exceptions.RequestException, OSError) as e:
        logger.debug("Could not read body of {} response: {}".format(response.status_code, e))
        body = ""

    raise service_errors.error_from_status_code(response.status_code, body)


def parse_message(response, log=None):
    """
    Create a Message from a successful peek-lock response.

    :param response: The response to parse
    :type response: :class:`requests.Response`
    :param log: Sink for debug and error messages (defaults to this module's logger)
    :returns: :class:`azure.sbqueue.Message`
    :raises: :class:`azure.sbqueue.exceptions.ClientError` if the body can't be read
    """
    if log is None:
        log = logger

    log.debug("Response StatusCode {}".format(response.status_code))
    log.debug("Response Status {}".format(response.reason))
    log.debug("Response Header {}".format(response.headers))
    log.debug("Response ContentLength {}".format(response.headers.get("Content-Length")))

    message = Message()
    parse_headers(message, response)

    broker_properties = response.headers.get(constant.HEADER_BROKER_PROPERTIES)
    if broker_properties:
        parse_broker_properties(message, broker_properties, log)

    try:
        message.body = response.content
    except (requests.exceptions.RequestException, OSError) as e:
        raise ClientError("Error reading message body") from e

    return message


def parse_headers(message, response):
    """Copy the headers of a response onto a message"""
    for name, value in response.headers.items():
        handler = _header_handlers.get(name.lower(), _set_custom_property)
        handler(message, name, value)


def parse_broker_properties(message, broker_properties, log=None):
    """
    Apply a BrokerProperties header value to a message.

    A value that can't be parsed is logged and otherwise ignored, so the rest of the message
    can still be delivered.
    """
    if log is None:
        log = logger

    log.debug("Response BrokerProperties {}".format(broker_properties))

    try:
        props = BrokerProperties.from_json(broker_properties)
    except ValueError as e:
        log.error("BrokerProperties header parse failed: {}".format(e))
        return

    props.apply_to(message)


def _skip(message, name, value):
    pass


def _set_content_type(message, name, value):
    message.content_type = value


def _set_enqueued_time(message, name, value):
    enqueued_time = parse_rfc2616_datetime(value)
    if enqueued_time is not None:
        message.enqueued_time_utc = enqueued_time


def _set_custom_property(message, name, value):
    # The service returns custom property values quoted
    message.custom_properties[name] = value.strip('"')


# Handlers for known protocol headers, by lowercase name. Any other header is a custom property.
_header_handlers = {
    constant.HEADER_BROKER_PROPERTIES.lower(): _skip,
    constant.HEADER_CONTENT_TYPE.lower(): _set_content_type,
    constant.HEADER_DATE.lower(): _set_enqueued_time,
}
