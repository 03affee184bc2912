# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define Service Bus queue user-facing exceptions to be shared across package"""
from .service_errors import (  # noqa: F401 (Importing directly to re-export)
    ServiceError,
    NoMessagesAvailableError,
    BadRequestError,
    UnauthorizedError,
    MessageNotFoundError,
    QueueNotFoundError,
    InternalServiceError,
    FailedStatusCodeError,
)
from .sastoken import SasTokenError  # noqa: F401


class ClientError(Exception):
    """Represents a failure from the queue client that is not reported by the service
    (request construction, network transport, reading a response)"""

    pass
