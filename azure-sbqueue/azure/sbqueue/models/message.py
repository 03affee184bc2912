# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains a class representing messages that are sent or received.

See https://docs.microsoft.com/en-us/rest/api/servicebus/message-headers-and-properties
"""


class Message(object):
    """Represents a message to or from a Service Bus queue

    :ivar body: The bytes that constitute the payload
    :ivar custom_properties: Dictionary of user-defined message properties, sent as HTTP headers
    :ivar message_id: Identifier of the message. Set by the service on receive if not provided
    :ivar session_id: Identifier of the session the message belongs to
    :ivar correlation_id: A property in a response message that typically contains the message_id
        of the request, in request-reply patterns
    :ivar sequence_number: Unique number assigned to the message by the service (receive only)
    :ivar delivery_count: Number of times the message has been delivered (receive only)
    :ivar lock_token: Token of the peek-lock held on the message (receive only)
    :ivar time_to_live: Time to live of the message, in seconds
    :ivar label: Application-specific label
    :ivar to: Address the message is sent to
    :ivar reply_to: Address to reply to
    :ivar reply_to_session_id: Session to reply to
    :ivar partition_key: Partition key of the message
    :ivar enqueued_time_utc: Time the message was enqueued, in UTC (receive only)
    :ivar locked_until_utc: Time the peek-lock expires, in UTC (receive only)
    :ivar scheduled_enqueue_time_utc: Time at which the message is to be enqueued, in UTC
    :ivar content_type: Content type of the body
    """

    def __init__(
        self,
        body=b"",
        message_id=None,
        content_type=None,
        correlation_id=None,
        session_id=None,
        custom_properties=None,
    ):
        """
        Initializer for Message

        :param body: The payload. A str is encoded as UTF-8
        :type body: bytes or str
        :param str message_id: A user-settable identifier for the message
        :param str content_type: Content type of the body. Not sent if not set
        :param str correlation_id: Correlation identifier used in request-reply patterns
        :param str session_id: Session identifier
        :param dict custom_properties: User-defined properties
        """
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.body = body
        self.custom_properties = dict(custom_properties) if custom_properties else {}
        self.message_id = message_id
        self.content_type = content_type
        self.correlation_id = correlation_id
        self.session_id = session_id
        self.sequence_number = None
        self.delivery_count = None
        self.lock_token = None
        self.time_to_live = None
        self.label = None
        self.to = None
        self.reply_to = None
        self.reply_to_session_id = None
        self.partition_key = None
        self.enqueued_time_utc = None
        self.locked_until_utc = None
        self.scheduled_enqueue_time_utc = None

    def __str__(self):
        return self.body.decode("utf-8", errors="replace")

    def __repr__(self):
        return "Message(message_id={!r}, lock_token={!r}, content_type={!r})".format(
            self.message_id, self.lock_token, self.content_type
        )
