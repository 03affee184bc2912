# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
from azure.sbqueue.models import Message

logging.basicConfig(level=logging.DEBUG)

receive_only_attributes = [
    "sequence_number",
    "delivery_count",
    "lock_token",
    "enqueued_time_utc",
    "locked_until_utc",
]


@pytest.mark.describe("Message")
class TestMessage(object):
    @pytest.mark.it("Instantiates with an empty body and no properties by default")
    def test_defaults(self):
        msg = Message()
        assert msg.body == b""
        assert msg.custom_properties == {}
        assert msg.message_id is None
        assert msg.content_type is None
        assert msg.correlation_id is None
        assert msg.session_id is None

    @pytest.mark.it("Instantiates with all receive-only attributes unset")
    @pytest.mark.parametrize("attr", receive_only_attributes)
    def test_receive_only_unset(self, attr):
        assert getattr(Message(), attr) is None

    @pytest.mark.it("Instantiates with the given values")
    def test_values(self):
        msg = Message(
            body=b"some data",
            message_id="1",
            content_type="application/json",
            correlation_id="2",
            session_id="3",
            custom_properties={"Prop1": "Value1"},
        )
        assert msg.body == b"some data"
        assert msg.message_id == "1"
        assert msg.content_type == "application/json"
        assert msg.correlation_id == "2"
        assert msg.session_id == "3"
        assert msg.custom_properties == {"Prop1": "Value1"}

    @pytest.mark.it("Encodes a string body as UTF-8")
    def test_str_body(self):
        assert Message("héllo").body == "héllo".encode("utf-8")

    @pytest.mark.it("Copies the custom properties it is given")
    def test_custom_properties_copied(self):
        props = {"Prop1": "Value1"}
        msg = Message(custom_properties=props)
        msg.custom_properties["Prop2"] = "Value2"
        assert props == {"Prop1": "Value1"}

    @pytest.mark.it("Does not share custom properties between instances")
    def test_custom_properties_not_shared(self):
        msg1 = Message()
        msg2 = Message()
        msg1.custom_properties["Prop1"] = "Value1"
        assert msg2.custom_properties == {}

    @pytest.mark.it("Uses the decoded body as its string representation")
    def test_str(self):
        assert str(Message(b"some data")) == "some data"

    @pytest.mark.it("Includes identifying attributes in its representation")
    def test_repr(self):
        msg = Message(message_id="__fake_id__")
        msg.lock_token = "__fake_lock__"
        assert "__fake_id__" in repr(msg)
        assert "__fake_lock__" in repr(msg)
