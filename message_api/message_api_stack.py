from typing import List, Sequence

from aws_cdk import Stack, aws_apigateway as apigw, aws_iam as iam
from constructs import Construct

from common.models import (
    Endpoint,
    EnvironmentDescriptor,
    ProvisioningContext,
    ensure_unique_record_names,
)
from message_api.edge_construct import EdgeDistribution
from message_api.endpoint_construct import MessageEndpoint

# The only place environment identity is decided
DEFAULT_ENVIRONMENTS = (
    EnvironmentDescriptor(message="current", record_name="current"),
    EnvironmentDescriptor(message="pilot", record_name="pilot"),
)


class MessageApiStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        provisioning: ProvisioningContext,
        environments: Sequence[EnvironmentDescriptor] = DEFAULT_ENVIRONMENTS,
        edge_enabled: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        if not environments:
            raise ValueError("At least one environment must be provisioned")

        record_names = [environment.record_name for environment in environments]
        if edge_enabled:
            record_names += [environment.edge_record_name for environment in environments]
        ensure_unique_record_names(record_names)

        self.provisioning = provisioning
        self.endpoints: List[Endpoint] = []
        self.edge_distributions: List[EdgeDistribution] = []

        # API Gateway logging settings are account-wide, declared once per stack
        self.api_gateway_account = self._build_api_gateway_account()

        for environment in environments:
            suffix = environment.record_name.capitalize()

            # Direct REST API environment
            message_endpoint = MessageEndpoint(
                self,
                f"RestApi{suffix}",
                provisioning=provisioning,
                environment=environment,
            )
            message_endpoint.api.deployment_stage.node.add_dependency(
                self.api_gateway_account
            )
            endpoint = message_endpoint.endpoint
            self.endpoints.append(endpoint)

            # CloudFront in front of the environment's API stage
            if edge_enabled:
                self.edge_distributions.append(
                    EdgeDistribution(
                        self,
                        f"CloudFront{suffix}",
                        provisioning=provisioning,
                        environment=environment,
                        endpoint=endpoint,
                    )
                )

    def _build_api_gateway_account(self) -> apigw.CfnAccount:
        """Grant API Gateway the role it pushes execution and access logs with."""
        cloud_watch_role = iam.Role(
            self,
            "ApiGatewayCloudWatchRole",
            assumed_by=iam.ServicePrincipal("apigateway.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AmazonAPIGatewayPushToCloudWatchLogs"
                )
            ],
        )
        return apigw.CfnAccount(
            self,
            "ApiGatewayAccount",
            cloud_watch_role_arn=cloud_watch_role.role_arn,
        )
