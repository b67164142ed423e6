#  Copyright 2017 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
#  Licensed under the Apache License, Version 2.0 (the "License").
#  You may not use this file except in compliance with the License.
#  A copy of the License is located at
#
#      http://aws.amazon.com/apache2.0/
#
#  or in the "license" file accompanying this file. This file is distributed
#  on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either
#  express or implied. See the License for the specific language governing
#  permissions and limitations under the License.

"""
HTTP API (payload format 2.0) Lambda authorizer using simple responses.

The gateway is configured with the identity source `$request.header.x-amz-secret`; a request is let
through when that header equals the SECRET_VALUE environment variable. Simple responses allow or deny
the whole request, there is no per-route granularity. Use policy_authorizer for resource scoped decisions.
"""

import logging
import os

from base import check_string

logger = logging.getLogger()
logger.setLevel(logging.INFO)

SECRET_HEADER = 'x-amz-secret'
SECRET_ENV_VAR = 'SECRET_VALUE'


def find_header(headers, name):
    """Case-insensitive header lookup, returns None when the header is absent"""
    wanted = name.lower()
    for key, value in (headers or {}).items():
        if isinstance(key, str) and key.lower() == wanted:
            return value
    return None


def authorize(headers, expected_secret):
    """
    Compare the secret header against the expected value

    :param headers: request headers, any letter casing
    :param expected_secret: shared secret configured for the API, an empty value denies everything
    :return: simple authorizer response
    {
      "isAuthorized": bool,
      "context": {"matched": bool, "hasHeader": bool}
    }
    """
    secret_header = find_header(headers, SECRET_HEADER)
    has_header = check_string(secret_header)
    is_authorized = has_header and check_string(expected_secret) and secret_header == expected_secret

    return {
        'isAuthorized': is_authorized,
        'context': {
            'matched': is_authorized,
            'hasHeader': has_header,
        },
    }


def lambda_handler(event, context):
    expected_secret = os.environ.get(SECRET_ENV_VAR, '')
    if not expected_secret:
        logger.warning(f"{SECRET_ENV_VAR} is not configured, denying request")

    response = authorize(event.get('headers'), expected_secret)
    logger.info(f"Secret authorizer decision: authorized={response['isAuthorized']}, "
                f"hasHeader={response['context']['hasHeader']}, route={event.get('routeArn', '')}")
    return response
