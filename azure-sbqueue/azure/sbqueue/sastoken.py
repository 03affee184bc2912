# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Shared Access Signature (SAS) Tokens

See https://docs.microsoft.com/en-us/azure/service-bus-messaging/service-bus-sas
"""

import datetime
import logging
import math
import time
import urllib.parse
from typing import Dict, List, Optional
from .signing_mechanism import SigningMechanism
from . import constant

logger = logging.getLogger(__name__)

REQUIRED_SASTOKEN_FIELDS: List[str] = ["sr", "sig", "se"]
VALID_SASTOKEN_FIELDS: List[str] = REQUIRED_SASTOKEN_FIELDS + ["skn"]
TOKEN_FORMAT: str = "SharedAccessSignature sig={signature}&se={expiry}&skn={keyname}&sr={resource}"


class SasTokenError(Exception):
    """Error in SasToken"""

    pass


class SasToken:
    def __init__(self, sastoken_str: str) -> None:
        """Create a SasToken object from a SAS Token string
        :param str sastoken_str: The SAS Token string

        :raises: ValueError if SAS Token string is invalid
        """
        self._token_str: str = sastoken_str
        self._token_info: Dict[str, str] = _get_sastoken_info_from_string(sastoken_str)

    def __str__(self) -> str:
        return self._token_str

    def is_expired(self) -> bool:
        return time.time() >= self.expiry_time

    @property
    def expiry_time(self) -> int:
        """Expiry Time is READ ONLY"""
        return int(self._token_info["se"])

    @property
    def resource_uri(self) -> str:
        """Resource URI is READ ONLY"""
        uri = self._token_info["sr"]
        return urllib.parse.unquote(uri)

    @property
    def signature(self) -> str:
        """Signature is READ ONLY"""
        signature = self._token_info["sig"]
        return urllib.parse.unquote(signature)

    @property
    def key_name(self) -> Optional[str]:
        """Key Name is READ ONLY"""
        return self._token_info.get("skn")


class SasTokenGenerator:
    def __init__(self, signing_mechanism: SigningMechanism, key_name: str) -> None:
        """An object that can generate SasTokens for any resource URI, signed with a named key

        :param signing_mechanism: The signing mechanism that will be used to sign data
        :type signing mechanism: :class:`SigningMechanism`
        :param str key_name: Name of the shared access policy the key belongs to
        """
        self.signing_mechanism = signing_mechanism
        self.key_name = key_name

    def generate_sastoken(
        self, uri: str, now: Optional[datetime.datetime] = None
    ) -> SasToken:
        """Generate a new SasToken that expires SAS_TOKEN_TTL seconds after `now`

        :param str uri: The URI of the resource the token grants access to
        :param now: The time the token is generated at (defaults to the current time).
            Naive datetimes are interpreted as UTC.
        :type now: :class:`datetime.datetime`

        :raises: SasTokenError if the token cannot be generated
        """
        expiry_time = get_expiry_time(now)
        # Service Bus expects the resource to be query-escaped and then lowercased
        url_encoded_uri = urllib.parse.quote_plus(uri).lower()
        signature = get_signature(self.signing_mechanism, url_encoded_uri + "\n" + str(expiry_time))
        token_str = TOKEN_FORMAT.format(
            signature=signature,
            expiry=str(expiry_time),
            keyname=self.key_name,
            resource=url_encoded_uri,
        )
        return SasToken(token_str)


def get_signature(signing_mechanism: SigningMechanism, string_to_sign: str) -> str:
    """Sign a string and return the signature query-escaped, ready to be placed in a token

    :raises: SasTokenError if the string cannot be signed
    """
    try:
        signature = signing_mechanism.sign(string_to_sign)
    except Exception as e:
        # Because of variant signing mechanisms, we don't know what error might be raised.
        # So we catch all of them.
        raise SasTokenError("Unable to sign SasToken") from e
    return urllib.parse.quote_plus(signature)


def get_expiry_time(now: Optional[datetime.datetime] = None) -> int:
    """Return the expiry time (seconds since epoch, rounded to the nearest second) of a token
    generated at `now`"""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    expiry = now + datetime.timedelta(seconds=constant.SAS_TOKEN_TTL)
    return int(math.floor(expiry.timestamp() + 0.5))


def _get_sastoken_info_from_string(sastoken_string: str) -> Dict[str, str]:
    """Given a SAS Token string, return a dictionary of it's keys and values"""
    pieces = sastoken_string.split("SharedAccessSignature ")
    if len(pieces) != 2:
        raise ValueError("Invalid SAS Token string: Not a SAS Token ")

    # Get sastoken info as dictionary
    try:
        sastoken_info = dict(map(str.strip, sub.split("=", 1)) for sub in pieces[1].split("&"))  # type: ignore
    except Exception as e:
        raise ValueError("Invalid SAS Token string: Incorrectly formatted") from e

    # Validate that all required fields are present
    if not all(key in sastoken_info for key in REQUIRED_SASTOKEN_FIELDS):
        raise ValueError("Invalid SAS Token string: Not all required fields present")

    # Warn if extraneous fields are present
    if not all(key in VALID_SASTOKEN_FIELDS for key in sastoken_info):
        logger.warning("Unexpected fields present in SAS Token")

    return sastoken_info
