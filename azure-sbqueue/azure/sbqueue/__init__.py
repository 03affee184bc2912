"""Azure Service Bus Queue Library

This library provides a synchronous client and associated models for sending, receiving,
unlocking and deleting messages on an Azure Service Bus queue over HTTPS.
"""

from .queue_client import QueueClient  # noqa: F401
from .config import QueueClientConfig, ProxyOptions  # noqa: F401
from .models import Message, BrokerProperties  # noqa: F401
from . import exceptions  # noqa: F401
from .exceptions import (  # noqa: F401
    ClientError,
    ServiceError,
    NoMessagesAvailableError,
    BadRequestError,
    UnauthorizedError,
    MessageNotFoundError,
    QueueNotFoundError,
    InternalServiceError,
    FailedStatusCodeError,
    SasTokenError,
)
from .constant import VERSION as __version__  # noqa: F401
