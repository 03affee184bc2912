# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the azure-sbqueue package
"""

VERSION = "1.0.0"
USER_AGENT_IDENTIFIER = "azure-sbqueue-py"

# Queue endpoint
SCHEME = "https"
PORT = 443
DEFAULT_DOMAIN = "windows.net"
QUEUE_URL_FORMAT = "{scheme}://{namespace}.servicebus.{domain}:{port}/{queue_name}/"

# Shared Access Signature tokens expire this many seconds after they are generated.
# Tokens are built per request, so this only needs to cover a single round trip.
SAS_TOKEN_TTL = 300

# RFC 2616 date layout used by Service Bus in the Date header and in BrokerProperties.
# The trailing zone abbreviation is handled separately (see models.broker_properties).
RFC2616_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S"
RFC2616_ZONE = "GMT"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_BROKER_PROPERTIES = "BrokerProperties"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATE = "Date"
HEADER_USER_AGENT = "User-Agent"
