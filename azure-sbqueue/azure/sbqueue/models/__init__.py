"""Azure Service Bus Queue Models

This package provides object models for use within the Azure Service Bus queue client.
"""

from .message import Message  # noqa: F401
from .broker_properties import BrokerProperties  # noqa: F401
