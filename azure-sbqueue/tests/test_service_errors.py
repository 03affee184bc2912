# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
from azure.sbqueue import service_errors

logging.basicConfig(level=logging.DEBUG)

error_test_cases = [
    pytest.param(204, service_errors.NoMessagesAvailableError, id="204"),
    pytest.param(400, service_errors.BadRequestError, id="400"),
    pytest.param(401, service_errors.UnauthorizedError, id="401"),
    pytest.param(404, service_errors.MessageNotFoundError, id="404"),
    pytest.param(410, service_errors.QueueNotFoundError, id="410"),
    pytest.param(500, service_errors.InternalServiceError, id="500"),
]


@pytest.mark.describe(".error_from_status_code()")
class TestErrorFromStatusCode(object):
    @pytest.mark.it("Returns the error matching a known failed status code")
    @pytest.mark.parametrize("status_code, error_cls", error_test_cases)
    def test_known(self, status_code, error_cls):
        error = service_errors.error_from_status_code(status_code, "__fake_body__")
        assert type(error) is error_cls
        assert isinstance(error, service_errors.ServiceError)
        assert error.status_code == status_code
        assert error.body == "__fake_body__"

    @pytest.mark.it("Returns a distinct error type for each known status code")
    def test_distinct(self):
        error_types = {
            type(service_errors.error_from_status_code(sc))
            for sc in service_errors.status_code_to_error
        }
        assert len(error_types) == len(service_errors.status_code_to_error)

    @pytest.mark.it(
        "Returns a FailedStatusCodeError containing the status code and body for an unknown status code"
    )
    @pytest.mark.parametrize("status_code", [202, 403, 501])
    def test_unknown(self, status_code):
        error = service_errors.error_from_status_code(status_code, "hello")
        assert type(error) is service_errors.FailedStatusCodeError
        assert error.status_code == status_code
        assert error.body == "hello"
        assert str(error) == "Unknown status {} with body hello".format(status_code)
