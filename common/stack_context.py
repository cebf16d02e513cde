from attrs import define, field
from aws_cdk import RemovalPolicy, Stack, aws_logs as logs
from constructs import Construct

import common.constants as constants


@define(slots=True, frozen=True)
class StackContext:
    scope: Construct
    environment: str = field(
        metadata={"description": "Record name of the environment (current, pilot)"},
    )
    service: str = field(default=constants.SERVICE_NAME, init=False)
    component: str = field(default=constants.COMPONENT)

    @property
    def aws_region(self) -> str:
        return Stack.of(self.scope).region

    # ---------- layers ----------
    def build_power_tools_layer_arn(self) -> str:
        region = self.aws_region
        if not region:
            raise ValueError(
                "AWS region is not set, unable to resolve Power Tools Layer ARN"
            )
        return constants.POWER_TOOLS_LAYER.format(
            region=region,
            runtime=constants.POWER_TOOLS_PYTHON_RUNTIME,
            version=constants.POWER_TOOLS_VERSION,
            lambda_layer_account=constants.POWER_TOOLS_LAMBDA_LAYER_ACCOUNT,
            power_tools_type=constants.POWER_TOOLS_LAMBDA_LAYER_NAME,
            architecture=constants.POWER_TOOLS_ARCHITECTURE,
        )

    # ---------- naming ----------
    def build_resource_name(self, resource_type: str) -> str:
        """Build the physical name of a resource.

        Example: ex-current-message-function
        """
        return f"{self.service}-{self.environment}-{self.component}-{resource_type}".lower()

    def build_resource_id(self, resource_type: str) -> str:
        """Build the construct id of a resource.

        Example: ExCurrentMessageFunction
        """
        return (
            f"{self.service.capitalize()}"
            f"{self.environment.capitalize()}"
            f"{self.component.capitalize()}"
            f"{resource_type.capitalize()}"
        )

    def build_log_group(
        self, resource_type: str, prefix: str = constants.LAMBDA_LOG_GROUP_PREFIX
    ) -> logs.LogGroup:
        return logs.LogGroup(
            self.scope,
            self.build_resource_id(f"{resource_type}LogGroup"),
            log_group_name=f"{prefix}/{self.build_resource_name(resource_type)}",
            removal_policy=RemovalPolicy.DESTROY,
            retention=logs.RetentionDays.ONE_YEAR,
        )
