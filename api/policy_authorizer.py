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
API Gateway Lambda Authorizer returning IAM policy documents

permissive_authorizer is an always-allow stub: it grants execute-api:Invoke on whatever resource it is
invoked for and performs no check at all. It must not be used as access control until a decision rule
is added in front of generate_policy.
"""

import json
import logging
import os

logger = logging.getLogger()
logger.setLevel(logging.INFO)

POLICY_VERSION = '2012-10-17'
INVOKE_ACTION = 'execute-api:Invoke'
ALLOW = 'Allow'
DENY = 'Deny'

DEFAULT_PRINCIPAL_ID = 'user'


def generate_policy(principal_id, effect, resource, context=None):
    """
    Generate IAM policy for API Gateway, scoped to exactly the given resource
    """
    if effect not in (ALLOW, DENY):
        raise ValueError(f"Invalid policy effect: {effect}")

    auth_response = {
        'principalId': principal_id,
        'policyDocument': {
            'Version': POLICY_VERSION,
            'Statement': [
                {
                    'Action': [INVOKE_ACTION],
                    'Effect': effect,
                    'Resource': [resource]
                }
            ]
        }
    }

    # API Gateway context values must be strings
    if context:
        auth_response['context'] = {key: str(value) for key, value in context.items()}

    return auth_response


def get_resource_arn(event):
    """REST APIs send methodArn, HTTP APIs send routeArn. A missing ARN is an empty resource"""
    return event.get('methodArn') or event.get('routeArn') or ''


def permissive_authorizer(event, context):
    """
    Always-allow authorizer. Returns an Allow policy for the invoked resource
    """
    resource = get_resource_arn(event)
    principal_id = os.environ.get('PRINCIPAL_ID', DEFAULT_PRINCIPAL_ID)
    logger.warning(f"Permissive authorizer allowing {resource} without any check")

    policy = generate_policy(principal_id, ALLOW, resource)
    logger.info(f"Generated policy: {json.dumps(policy)}")
    return policy


lambda_handler = permissive_authorizer
