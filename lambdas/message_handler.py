import json
import os
from typing import Any, TypedDict

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

logger: Logger = Logger(
    service="ex-message-api", level=os.getenv("LOG_LEVEL", "INFO").upper()
)
message = os.environ.get("MESSAGE", "")


class MessageResponse(TypedDict):
    statusCode: int
    headers: dict[str, str]
    body: str


def build_message_response(text: str) -> MessageResponse:
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"message": text}, separators=(",", ":")),
    }


@logger.inject_lambda_context
def handler(event: dict[str, Any], context: LambdaContext) -> MessageResponse:
    logger.info("Returning environment message", environment_message=message)
    return build_message_response(message)
