# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module is for creating the user agent string sent with every queue request."""

import platform
from azure.sbqueue.constant import VERSION, USER_AGENT_IDENTIFIER

python_runtime = platform.python_version()
os_type = platform.system()
os_release = platform.version()
architecture = platform.machine()


def _get_common_user_agent():
    return "({python_runtime};{os_type} {os_release};{architecture})".format(
        python_runtime=python_runtime,
        os_type=os_type,
        os_release=os_release,
        architecture=architecture,
    )


def get_queue_user_agent(product_info=""):
    """
    Create the user agent for the Service Bus queue client

    :param str product_info: Custom identification string appended to the user agent (optional)
    """
    return "{iden}/{version}{common}{product_info}".format(
        iden=USER_AGENT_IDENTIFIER,
        version=VERSION,
        common=_get_common_user_agent(),
        product_info=product_info or "",
    )
