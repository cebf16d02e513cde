from pathlib import Path

from aws_cdk import aws_lambda as _lambda

POWER_TOOLS_PYTHON_RUNTIME = "python312"
POWER_TOOLS_LAMBDA_LAYER_NAME = "AWSLambdaPowertoolsPythonV3"
POWER_TOOLS_LAMBDA_LAYER_ACCOUNT = "017000801446"
POWER_TOOLS_VERSION = "18"
POWER_TOOLS_ARCHITECTURE = "x86_64"
POWER_TOOLS_LAYER = "arn:aws:lambda:{region}:{lambda_layer_account}:layer:{power_tools_type}-{runtime}-{architecture}:{version}"

PYTHON_RUNTIME = _lambda.Runtime.PYTHON_3_12
DEFAULT_ARCHITECTURE = _lambda.Architecture.X86_64
LAMBDA_SRC = str(Path(__file__).resolve().parent.parent / "lambdas")
MESSAGE_HANDLER = "message_handler.handler"

# Naming convention components
SERVICE_NAME = "ex"  # The application name
COMPONENT = "message"  # The functional component/subsystem

STACK_NAME = "ExStack"
REST_API_NAME = "ex{record_name}API"
STAGE_NAME = "prod"
MESSAGE_RESOURCE_PATH = "message"
EDGE_RECORD_PREFIX = "cloudfront"
EXECUTE_API_DOMAIN = "{api_id}.execute-api.{region}.amazonaws.com"
EDGE_CERTIFICATE_REGION = "us-east-1"

LAMBDA_LOG_GROUP_PREFIX = "/aws/lambda"
API_GATEWAY_LOG_GROUP_PREFIX = "/aws/apigateway"

# Configuration inputs: (environment variable, CDK context key)
HOSTED_ZONE_ID_INPUT = ("HOSTED_ZONE_ID", "hostedZoneId")
ZONE_NAME_INPUT = ("ZONE_NAME", "zoneName")
ACM_ARN_INPUT = ("ACM_ARN", "acmARN")
ACM_US_ARN_INPUT = ("ACM_US_ARN", "acmUsARN")
EDGE_ENABLED_INPUT = ("EDGE_ENABLED", "edgeEnabled")
TRUTHY_VALUES = ("true", "1", "yes", "on")
