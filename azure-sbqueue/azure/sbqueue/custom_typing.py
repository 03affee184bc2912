# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
from typing import Any
from typing_extensions import Protocol, TypedDict
import requests


class BrokerPropertiesDict(TypedDict, total=False):
    """Wire shape of the BrokerProperties header"""

    # Request and response
    MessageId: str
    Label: str
    CorrelationId: str
    SessionId: str
    TimeToLive: int
    To: str
    ReplyTo: str
    ScheduledEnqueueTimeUtc: str
    ReplyToSessionId: str
    PartitionKey: str

    # Response only
    DeliveryCount: int
    LockToken: str
    LockedUntilUtc: str
    SequenceNumber: int
    EnqueuedTimeUtc: str


class HTTPClient(Protocol):
    """Anything that can send a prepared request, e.g. a requests.Session"""

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        ...


class LogSink(Protocol):
    """Anything that accepts debug and error messages, e.g. a logging.Logger"""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        ...
