#!/usr/bin/env python3

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

import argparse
import json
import os
import sys

import boto3
import requests
from botocore.exceptions import BotoCoreError, ClientError

API_ENDPOINT_OUTPUT_KEY = 'AdminApiEndpoint'
CHAT_MESSAGES_PATH = '/chat/{chat_id}/message'
DEFAULT_CHAT_ID = '123abc'
SECRET_HEADER = 'x-amz-secret'
SECRET_ENV_VAR = 'CHAT_API_SECRET'
DEFAULT_SECRET = 'something'


class ProbeError(Exception):
    pass


class ConfigurationError(ProbeError):
    pass


class StackLookupError(ProbeError):
    pass


class EndpointNotFoundError(ProbeError):
    pass


class InvocationError(ProbeError):
    pass


class ProbeArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        """
        Any argument problem is a plain failure for this tool: exit 1 instead of argparse's 2
        """
        self.print_usage(sys.stderr)
        raise SystemExit(f'{self.prog}: error: {message}')


def load_cloudformation_client(profile):
    """
    Loads the shared AWS configuration and credentials of the given profile
    and builds a CloudFormation client from them. A profile without a region fails here.
    """
    try:
        session = boto3.Session(profile_name=profile)
        return session.client('cloudformation')
    except BotoCoreError as e:
        raise ConfigurationError(f'Error loading AWS config: {e}') from e


def describe_stack_outputs(cf_client, stack_name):
    """
    :param cf_client: boto3 CloudFormation client
    :param stack_name: name or id of the deployed stack
    :return: outputs of every stack returned by DescribeStacks, in order
    """
    try:
        stacks = cf_client.describe_stacks(StackName=stack_name)['Stacks']
    except (BotoCoreError, ClientError) as e:
        raise StackLookupError(f'Unable to describe stack {stack_name}: {e}') from e

    outputs = []
    for stack in stacks:
        outputs.extend(stack.get('Outputs', []))
    return outputs


def get_api_endpoint(cf_client, stack_name, output_key=API_ENDPOINT_OUTPUT_KEY):
    for output in describe_stack_outputs(cf_client, stack_name):
        if output.get('OutputKey') == output_key:
            return output['OutputValue']
    raise EndpointNotFoundError(f'{output_key} not found in stack outputs')


def build_chat_url(api_endpoint, path=CHAT_MESSAGES_PATH, chat_id=DEFAULT_CHAT_ID):
    return api_endpoint + path.format(chat_id=chat_id)


def invoke_chat_endpoint(api_endpoint, secret, path=CHAT_MESSAGES_PATH, chat_id=DEFAULT_CHAT_ID):
    """
    Sends one authenticated GET to the chat API and prints what comes back.

    :param api_endpoint: base URL of the deployed API including the stage
    :param secret: value sent in the x-amz-secret header
    :return: response body parsed as a JSON object
    """
    url = build_chat_url(api_endpoint, path=path, chat_id=chat_id)
    print(url)

    try:
        r = requests.get(url, headers={SECRET_HEADER: secret})
    except requests.RequestException as e:
        raise InvocationError(f'Failed to invoke {url}: {e}') from e

    body = r.text
    print(body)

    try:
        result = json.loads(body)
    except ValueError as e:
        raise InvocationError(f'Failed to parse response: {e}') from e
    if not isinstance(result, dict):
        raise InvocationError(f'Failed to parse response: expected a JSON object, got {type(result).__name__}')

    print(f'Response: {result}')
    return result


DESCRIPTION = """
The Chat Probe looks up the Admin API endpoint of a deployed stack
and calls GET /chat/{chat_id}/message on it with the shared secret header.

The secret defaults to the demo value and can be overridden with the
CHAT_API_SECRET environment variable.

Requires the probe extra of this project:  pip install ".[probe]"
"""


def build_parser():
    parser = ProbeArgumentParser(
        description=DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        '--stack', required=True,
        help='Name of the CloudFormation stack'
    )
    parser.add_argument(
        '--profile', default='default',
        help='AWS CLI profile to use. Defaults to "default"'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.stack:
        parser.error('--stack parameter is required')
    secret = os.environ.get(SECRET_ENV_VAR, DEFAULT_SECRET)

    try:
        cf_client = load_cloudformation_client(args.profile)
        api_endpoint = get_api_endpoint(cf_client, args.stack)
        invoke_chat_endpoint(api_endpoint, secret)
    except ProbeError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
