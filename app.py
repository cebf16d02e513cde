#!/usr/bin/env python3
"""AWS CDK entrypoint for provisioning the message API environments.

Provisions the "current" and "pilot" REST APIs, each behind its own custom
domain in the shared hosted zone. Zone and certificate inputs come from the
HOSTED_ZONE_ID, ZONE_NAME, ACM_ARN and ACM_US_ARN environment variables (or
the matching CDK context keys); set EDGE_ENABLED to front them with CloudFront.
"""
import os

import aws_cdk as cdk
from aws_cdk import Environment

import common.constants as constants
from common.config import load_deployment_config
from message_api.message_api_stack import MessageApiStack

app = cdk.App()

env = Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION"),
)
config = load_deployment_config(app)

MessageApiStack(
    app,
    constants.STACK_NAME,
    provisioning=config.provisioning,
    edge_enabled=config.edge_enabled,
    env=env,
)

app.synth()
