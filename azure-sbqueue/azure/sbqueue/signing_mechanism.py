# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines an abstract SigningMechanism, as well as common child implementations of it
"""

import abc
import hmac
import hashlib
import base64
from typing import Union


class SigningMechanism(abc.ABC):
    @abc.abstractmethod
    def sign(self, data_str: Union[str, bytes]) -> str:
        pass


class SymmetricKeySigningMechanism(SigningMechanism):
    def __init__(self, key: Union[str, bytes]) -> None:
        """
        A mechanism that signs data using a symmetric key

        Service Bus shared access keys are used as-is for signing. They are NOT base64
        decoded first.

        :param key: Shared access key value
        :type key: str or bytes
        """
        if not key:
            raise ValueError("Invalid Symmetric Key")

        # Convert key to bytes
        try:
            key = key.encode("utf-8")  # type: ignore[union-attr]
        except AttributeError:
            # If byte string, no need to encode
            pass

        self._signing_key = key

    def sign(self, data_str: Union[str, bytes]) -> str:
        """
        Sign a data string with symmetric key and the HMAC-SHA256 algorithm.

        :param data_str: Data string to be signed
        :type data_str: str or bytes

        :returns: The signed data, base64 encoded
        :rtype: str
        """
        # Convert data_str to bytes
        try:
            data_str = data_str.encode("utf-8")  # type: ignore[union-attr]
        except AttributeError:
            # If byte string, no need to encode
            pass

        # Derive signature via HMAC-SHA256 algorithm
        try:
            hmac_digest = hmac.HMAC(
                key=self._signing_key, msg=data_str, digestmod=hashlib.sha256
            ).digest()
            signed_data = base64.b64encode(hmac_digest)
        except TypeError:
            raise ValueError("Unable to sign string using the provided symmetric key")
        # Convert from bytes to string
        return signed_data.decode("utf-8")
