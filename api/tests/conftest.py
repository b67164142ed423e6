#  Test Fixtures for the Chat API Lambda functions
#  Copyright 2017 Amazon.com, Inc. or its affiliates. All Rights Reserved.

import os
import sys
import pytest
from unittest.mock import Mock

# Add the parent directory to the Python path so we can import the Lambda modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

TEST_SECRET = 'test-shared-secret'
TEST_METHOD_ARN = 'arn:aws:execute-api:eu-west-1:123456789012:abcdef123/prod/GET/chat'
TEST_ROUTE_ARN = 'arn:aws:execute-api:eu-west-1:123456789012:abcdef123/prod/GET/chat/{chat_id}/message'

os.environ['SECRET_VALUE'] = TEST_SECRET
os.environ.pop('PRINCIPAL_ID', None)


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing"""
    mock_context = Mock()
    mock_context.aws_request_id = 'test-request-id'
    mock_context.function_name = 'chat-api-test'
    return mock_context


@pytest.fixture
def http_api_event():
    """Factory for HTTP API payload format 2.0 events"""
    def _create(route_key='GET /chat', headers=None, path_parameters=None, body=None):
        method, _, path = route_key.partition(' ')
        return {
            'version': '2.0',
            'routeKey': route_key,
            'rawPath': path,
            'rawQueryString': '',
            'headers': headers or {},
            'pathParameters': path_parameters,
            'requestContext': {
                'http': {'method': method, 'path': path},
                'stage': 'prod',
            },
            'body': body,
            'isBase64Encoded': False,
        }
    return _create


@pytest.fixture
def authorizer_event():
    """Factory for REQUEST authorizer events carrying identity headers"""
    def _create(headers=None, route_arn=TEST_ROUTE_ARN):
        return {
            'version': '2.0',
            'type': 'REQUEST',
            'routeArn': route_arn,
            'identitySource': list((headers or {}).values()),
            'routeKey': 'GET /chat/{chat_id}/message',
            'headers': headers or {},
        }
    return _create
