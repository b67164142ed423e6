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
Chat API - Lambda Function Handler
Routes HTTP API (payload format 2.0) requests to the chat handlers by routeKey
"""

import json
import logging
from types import MappingProxyType

from base import NotFoundError, text_response
from chat import list_chats, list_chat_messages

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Read-only once the module is loaded
ROUTE_MAP = MappingProxyType({
    ('GET', '/chat'): list_chats,
    ('GET', '/chat/{chat_id}/message'): list_chat_messages,
})


def parse_route_key(route_key):
    """Split 'GET /chat' into ('GET', '/chat'). Keys such as '$default' have no path"""
    method, _, path = (route_key or '').partition(' ')
    return method, path


def resolve_route(route_key):
    handler = ROUTE_MAP.get(parse_route_key(route_key))
    if handler is None:
        raise NotFoundError(f"Route not found: {route_key}")
    return handler


def lambda_handler(event, context):
    """
    Main Lambda handler. Handler results and exceptions are passed through untouched
    """
    try:
        logger.info(f"Received event: {json.dumps(event)}")
    except (TypeError, ValueError) as e:
        logger.error(f"Could not serialize event: {str(e)}")
        return text_response('Internal Server Error', 500)

    try:
        handler = resolve_route(event.get('routeKey'))
    except NotFoundError as e:
        logger.warning(str(e))
        return text_response('Not Found', e.status_code)

    return handler(event, context)
