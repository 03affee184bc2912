# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the wire model of the BrokerProperties header, along with
helpers for the RFC 2616 dates it carries.

See https://docs.microsoft.com/en-us/rest/api/servicebus/message-headers-and-properties
"""

import datetime
import json
import logging
from typing import Any, Dict, Optional, cast
from azure.sbqueue import constant
from azure.sbqueue.custom_typing import BrokerPropertiesDict
from .message import Message

logger = logging.getLogger(__name__)

# (JSON key, Message attribute) for plain values that can be set on a request
_REQUEST_FIELDS = [
    ("MessageId", "message_id"),
    ("Label", "label"),
    ("CorrelationId", "correlation_id"),
    ("SessionId", "session_id"),
    ("TimeToLive", "time_to_live"),
    ("To", "to"),
    ("ReplyTo", "reply_to"),
    ("ReplyToSessionId", "reply_to_session_id"),
    ("PartitionKey", "partition_key"),
]

# Plain values only ever set by the service
_RESPONSE_FIELDS = [
    ("DeliveryCount", "delivery_count"),
    ("LockToken", "lock_token"),
    ("SequenceNumber", "sequence_number"),
]

# RFC 2616 date strings
_DATE_FIELDS = [
    ("ScheduledEnqueueTimeUtc", "scheduled_enqueue_time_utc"),
    ("LockedUntilUtc", "locked_until_utc"),
    ("EnqueuedTimeUtc", "enqueued_time_utc"),
]

_ALL_FIELDS = _REQUEST_FIELDS + _RESPONSE_FIELDS + _DATE_FIELDS


class BrokerProperties(object):
    """Broker metadata of a message, as carried in the BrokerProperties header.

    Attribute names match the JSON keys. Unset values are None and are omitted from the JSON.
    """

    def __init__(self, **kwargs: Any) -> None:
        for key, _ in _ALL_FIELDS:
            setattr(self, key, kwargs.pop(key, None))
        if kwargs:
            raise TypeError("Unsupported broker properties: {}".format(", ".join(kwargs)))

    def __eq__(self, other):
        if not isinstance(other, BrokerProperties):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return "BrokerProperties({})".format(self.as_dict())

    @classmethod
    def from_message(cls, message: Message) -> "BrokerProperties":
        """Create BrokerProperties from the request-settable fields of a message.
        Service-assigned fields (lock token, sequence number, ...) are never sent.
        """
        props = cls()
        for key, attr in _REQUEST_FIELDS:
            setattr(props, key, getattr(message, attr))
        if message.scheduled_enqueue_time_utc is not None:
            props.ScheduledEnqueueTimeUtc = format_rfc2616_datetime(
                message.scheduled_enqueue_time_utc
            )
        return props

    @classmethod
    def from_json(cls, json_str: str) -> "BrokerProperties":
        """Parse a BrokerProperties header value. Unknown keys are ignored.

        :raises: ValueError if the value is not a JSON object
        """
        try:
            data = json.loads(json_str)
        except (TypeError, ValueError) as e:
            raise ValueError("BrokerProperties is not valid JSON") from e
        if not isinstance(data, dict):
            raise ValueError("BrokerProperties is not a JSON object")
        return cls(**{key: data[key] for key, _ in _ALL_FIELDS if key in data})

    def as_dict(self) -> BrokerPropertiesDict:
        """Return the non-empty fields as a dictionary keyed by their JSON names"""
        d: Dict[str, Any] = {}
        for key, _ in _ALL_FIELDS:
            value = getattr(self, key)
            if not _is_empty(value):
                d[key] = value
        return cast(BrokerPropertiesDict, d)

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), separators=(",", ":"))

    def apply_to(self, message: Message) -> None:
        """Overwrite the fields of a message with these broker properties.

        Dates that cannot be parsed leave the message field untouched.
        """
        for key, attr in _REQUEST_FIELDS + _RESPONSE_FIELDS:
            value = getattr(self, key)
            if value is not None:
                setattr(message, attr, value)
        for key, attr in _DATE_FIELDS:
            parsed = parse_rfc2616_datetime(getattr(self, key))
            if parsed is not None:
                setattr(message, attr, parsed)


def _is_empty(value):
    return value is None or value == "" or (isinstance(value, int) and value == 0)


def parse_rfc2616_datetime(value: Optional[str]) -> Optional[datetime.datetime]:
    """Parse a date such as 'Sun, 06 Nov 1994 08:49:37 GMT'.

    The zone abbreviation must be present but is not interpreted: the time is always UTC.

    :returns: An aware datetime in UTC, or None if the value can't be parsed
    """
    if not value or not isinstance(value, str):
        return None
    try:
        date_part, zone = value.strip().rsplit(" ", 1)
    except ValueError:
        return None
    if not zone.isalpha():
        return None
    try:
        parsed = datetime.datetime.strptime(date_part, constant.RFC2616_DATE_FORMAT)
    except ValueError:
        logger.debug("Could not parse date '{}'".format(value))
        return None
    return parsed.replace(tzinfo=datetime.timezone.utc)


def format_rfc2616_datetime(value: datetime.datetime) -> str:
    """Format a datetime as an RFC 2616 date in GMT. Naive datetimes are treated as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    value = value.astimezone(datetime.timezone.utc)
    return "{} {}".format(value.strftime(constant.RFC2616_DATE_FORMAT), constant.RFC2616_ZONE)
