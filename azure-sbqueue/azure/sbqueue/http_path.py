# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

from . import constant


def get_queue_url(namespace, queue_name, domain=constant.DEFAULT_DOMAIN):
    """
    :return: The base URL of a queue. It is of the format
    https://$namespace.servicebus.$domain:443/$queue_name/
    """
    return constant.QUEUE_URL_FORMAT.format(
        scheme=constant.SCHEME,
        namespace=namespace,
        domain=domain,
        port=constant.PORT,
        queue_name=queue_name,
    )


def get_receive_path(timeout):
    """
    :return: The path for peek-locking the message at the head of the queue. It is of the format
    messages/head?timeout=$timeout
    """
    return "messages/head?timeout={}".format(int(timeout))


def get_send_path():
    """
    :return: The path for sending a message to the queue.
    """
    return "messages/"


def get_message_lock_path(message_id, lock_token):
    """
    Used to both unlock (PUT) and delete (DELETE) a peek-locked message.

    :return: The path of a locked message. It is of the format
    messages/$message_id/$lock_token
    """
    return "messages/{message_id}/{lock_token}".format(
        message_id=message_id, lock_token=lock_token
    )
