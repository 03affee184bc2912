# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines errors that may be raised from a Service Bus queue response.

Every error carries the HTTP status code returned by the service, along with the raw
response body text.
"""


class ServiceError(Exception):
    """
    Service returned a status code other than 200 or 201
    """

    default_message = "Service returned an error"

    def __init__(self, status_code, body="", message=None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or self.default_message)


class NoMessagesAvailableError(ServiceError):
    """
    Service returned 204
    """

    default_message = "No messages available within the specified timeout period"


class BadRequestError(ServiceError):
    """
    Service returned 400
    """

    default_message = "Bad request"


class UnauthorizedError(ServiceError):
    """
    Service returned 401
    """

    default_message = "Authorization failure"


class MessageNotFoundError(ServiceError):
    """
    Service returned 404
    """

    default_message = "No message was found with the specified MessageId or LockToken"


class QueueNotFoundError(ServiceError):
    """
    Service returned 410
    """

    default_message = "Specified queue or subscription does not exist"


class InternalServiceError(ServiceError):
    """
    Service returned 500
    """

    default_message = "Internal error"


class FailedStatusCodeError(ServiceError):
    """
    Service returned unknown status code
    """

    def __init__(self, status_code, body=""):
        super().__init__(
            status_code,
            body,
            message="Unknown status {} with body {}".format(status_code, body),
        )


status_code_to_error = {
    204: NoMessagesAvailableError,
    400: BadRequestError,
    401: UnauthorizedError,
    404: MessageNotFoundError,
    410: QueueNotFoundError,
    500: InternalServiceError,
}


def error_from_status_code(status_code, body=""):
    """
    Return an Error object from a failed status code

    :param int status_code: Status code returned from failed operation
    :param str body: Text of the response body
    :returns: Error object
    """
    if status_code in status_code_to_error:
        return status_code_to_error[status_code](status_code, body)
    else:
        return FailedStatusCodeError(status_code, body)
