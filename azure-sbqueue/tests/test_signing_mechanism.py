# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
import hmac
import hashlib
import base64
from azure.sbqueue.signing_mechanism import SymmetricKeySigningMechanism

logging.basicConfig(level=logging.DEBUG)


@pytest.mark.describe("SymmetricKeySigningMechanism - Instantiation")
class TestSymmetricKeySigningMechanismInstantiation(object):
    @pytest.mark.it("Uses the UTF-8 encoding of a str key as the signing key, without base64 decoding it")
    def test_str_key(self):
        sm = SymmetricKeySigningMechanism(key="keyvalue")
        assert sm._signing_key == b"keyvalue"

    @pytest.mark.it("Uses a bytes key as the signing key as-is")
    def test_bytes_key(self):
        sm = SymmetricKeySigningMechanism(key=b"keyvalue")
        assert sm._signing_key == b"keyvalue"

    @pytest.mark.it("Raises a ValueError if the key is empty")
    @pytest.mark.parametrize("key", [pytest.param("", id="str"), pytest.param(b"", id="bytes")])
    def test_empty_key(self, key):
        with pytest.raises(ValueError):
            SymmetricKeySigningMechanism(key=key)


@pytest.mark.describe("SymmetricKeySigningMechanism - .sign()")
class TestSymmetricKeySigningMechanismSign(object):
    @pytest.fixture
    def signing_mechanism(self):
        return SymmetricKeySigningMechanism(key="keyvalue")

    @pytest.mark.it(
        "Generates an HMAC message digest from the signing key and provided data string, using the HMAC-SHA256 algorithm"
    )
    def test_hmac(self, mocker, signing_mechanism):
        hmac_mock = mocker.patch.object(hmac, "HMAC")
        hmac_digest_mock = hmac_mock.return_value.digest
        hmac_digest_mock.return_value = b"\xd2\x06\xf7\x12\xf1\xe9\x95\xe1"
        data_string = "sign this message"

        signing_mechanism.sign(data_string)

        assert hmac_mock.call_count == 1
        assert hmac_mock.call_args == mocker.call(
            key=b"keyvalue", msg=data_string.encode("utf-8"), digestmod=hashlib.sha256
        )
        assert hmac_digest_mock.call_count == 1

    @pytest.mark.it("Returns the base64 encoded HMAC message digest as a str")
    def test_b64encode(self, signing_mechanism):
        data_string = "https://test.servicebus.windows.net:443/test/\n1514768461"
        expected = base64.b64encode(
            hmac.new(b"keyvalue", data_string.encode("utf-8"), hashlib.sha256).digest()
        ).decode("utf-8")

        signature = signing_mechanism.sign(data_string)

        assert signature == expected
        assert signature == "kdSuuUQda/Pnrx+jPi5qaRCyclvMwUV89nYRlm8jlbc="

    @pytest.mark.it("Accepts bytes data")
    def test_bytes_data(self, signing_mechanism):
        assert signing_mechanism.sign(b"some data") == signing_mechanism.sign("some data")

    @pytest.mark.it("Is deterministic")
    def test_deterministic(self, signing_mechanism):
        assert signing_mechanism.sign("some data") == signing_mechanism.sign("some data")

    @pytest.mark.it("Produces a different signature if a single character of the data changes")
    @pytest.mark.parametrize(
        "other",
        [
            pytest.param("some datb", id="Last character"),
            pytest.param("Some data", id="Case change"),
            pytest.param("some data ", id="Appended character"),
        ],
    )
    def test_adjacent_inputs(self, signing_mechanism, other):
        assert signing_mechanism.sign("some data") != signing_mechanism.sign(other)

    @pytest.mark.it("Raises a ValueError if unable to sign the provided data string")
    def test_bad_input(self, mocker, signing_mechanism):
        hmac_mock = mocker.patch.object(hmac, "HMAC")
        hmac_mock.side_effect = TypeError

        with pytest.raises(ValueError):
            signing_mechanism.sign("sign this message")
