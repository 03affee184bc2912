# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Service Bus Connection Strings"""

import urllib.parse

__all__ = ["ConnectionString"]

CS_DELIMITER = ";"
CS_VAL_SEPARATOR = "="

ENDPOINT = "Endpoint"
SHARED_ACCESS_KEY_NAME = "SharedAccessKeyName"
SHARED_ACCESS_KEY = "SharedAccessKey"
ENTITY_PATH = "EntityPath"

SERVICEBUS_HOST_INFIX = ".servicebus."

_valid_keys = [
    ENDPOINT,
    SHARED_ACCESS_KEY_NAME,
    SHARED_ACCESS_KEY,
    ENTITY_PATH,
]


class ConnectionString(object):
    """Key/value mappings for connection details.
    Uses the same syntax as dictionary
    """

    def __init__(self, connection_string):
        """Initializer for ConnectionString

        :param str connection_string: String with connection details provided by Azure
        :raises: ValueError if provided connection_string is invalid
        """
        self._dict = _parse_connection_string(connection_string)
        self._strrep = connection_string

    def __contains__(self, item):
        return item in self._dict

    def __getitem__(self, key):
        return self._dict[key]

    def __repr__(self):
        return self._strrep

    def get(self, key, default=None):
        """Return the value for key if key is in the dictionary, else default

        :param str key: The key to retrieve a value for
        :param str default: The default value returned if a key is not found
        :returns: The value for the given key
        """
        try:
            return self._dict[key]
        except KeyError:
            return default

    @property
    def namespace(self):
        """The Service Bus namespace, e.g. 'mynamespace' for sb://mynamespace.servicebus.windows.net/"""
        return _split_endpoint_host(self._dict[ENDPOINT])[0]

    @property
    def domain(self):
        """The cloud domain, e.g. 'windows.net' for sb://mynamespace.servicebus.windows.net/"""
        return _split_endpoint_host(self._dict[ENDPOINT])[1]


def _parse_connection_string(connection_string):
    """Return a dictionary of values contained in a given connection string"""
    try:
        # Portal-issued strings can end with a trailing delimiter
        cs_args = [arg for arg in connection_string.strip().split(CS_DELIMITER) if arg]
    except (AttributeError, TypeError):
        raise TypeError("Connection String must be of type str")
    try:
        d = dict(arg.split(CS_VAL_SEPARATOR, 1) for arg in cs_args)
    except ValueError:
        # This occurs in an extreme edge case where a dictionary cannot be formed because there
        # is only 1 token after the split (dict requires two in order to make a key/value pair)
        raise ValueError("Invalid Connection String - Unable to parse")
    if len(cs_args) != len(d):
        # various errors related to incorrect parsing - duplicate args, bad syntax, etc.
        raise ValueError("Invalid Connection String - Unable to parse")
    if not all(key in _valid_keys for key in d.keys()):
        raise ValueError("Invalid Connection String - Invalid Key")
    _validate_keys(d)
    return d


def _validate_keys(d):
    """Raise ValueError if incorrect combination of keys in dict d"""
    if not d.get(SHARED_ACCESS_KEY_NAME) or not d.get(SHARED_ACCESS_KEY):
        raise ValueError("Invalid Connection String - No authentication scheme")

    if not d.get(ENDPOINT):
        raise ValueError("Invalid Connection String - Missing connection details")

    # Raises if the endpoint is not a Service Bus endpoint
    _split_endpoint_host(d[ENDPOINT])


def _split_endpoint_host(endpoint):
    """Return (namespace, domain) from an endpoint such as sb://ns.servicebus.windows.net/"""
    host = urllib.parse.urlparse(endpoint).hostname
    if not host or SERVICEBUS_HOST_INFIX not in host:
        raise ValueError("Invalid Connection String - Endpoint is not a Service Bus endpoint")
    namespace, domain = host.split(SERVICEBUS_HOST_INFIX, 1)
    if not namespace or not domain:
        raise ValueError("Invalid Connection String - Endpoint is not a Service Bus endpoint")
    return namespace, domain
