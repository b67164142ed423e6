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

from base import text_response


def list_chats(event, context=None):
    """
    List the chats visible to the caller

    Placeholder: always answers with a fixed text body.

    :param event: Lambda event for GET /chat
    :return: response dictionary
    {
      "statusCode": 200,
      "body": "List of chats"
    }
    """
    return text_response('List of chats')


def list_chat_messages(event, context=None):
    """
    List the messages of a single chat

    Placeholder: the chat_id path parameter is not read yet.

    :param event: Lambda event for GET /chat/{chat_id}/message
    {
      "pathParameters":
      {
        "chat_id": string ID of the chat
      }
    }
    :return: response dictionary
    {
      "statusCode": 200,
      "body": "List of messages in chat"
    }
    """
    return text_response('List of messages in chat')
