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

import json


class ClientError(Exception):
    status_code = 400


class NotFoundError(ClientError):
    status_code = 404


TEXT_PLAIN = {'Content-Type': 'text/plain'}


class Response:
    def __init__(self, body=None, headers=None, status_code=None):
        self.headers = dict(headers or {})
        self.body = body
        self.status_code = status_code

    def to_response(self):
        """
        Build the API Gateway proxy integration envelope.

        A body with an explicit Content-Type is passed through untouched, anything else is JSON encoded.
        """
        response = {'headers': self.headers}
        status_code = self.status_code
        if self.body is not None:
            if status_code is None:
                status_code = 200
            if 'Content-Type' in response['headers']:
                response['body'] = self.body
            else:
                response['headers']['Content-Type'] = 'application/json'
                response['body'] = json.dumps(self.body, sort_keys=True)

        if status_code is None:
            status_code = 204
        response['statusCode'] = status_code
        return response


def text_response(body, status_code=200):
    return Response(body=body, headers=TEXT_PLAIN, status_code=status_code).to_response()


def check_string(string):
    return isinstance(string, str) and len(string) > 0
