from typing import cast

from aws_cdk import (
    CfnOutput,
    Duration,
    aws_apigateway as apigw,
    aws_certificatemanager as acm,
    aws_lambda as _lambda,
    aws_logs as logs,
    aws_route53 as route53,
    aws_route53_targets as targets,
)
from constructs import Construct

import common.constants as constants
from common.models import Endpoint, EnvironmentDescriptor, ProvisioningContext
from common.stack_context import StackContext


class MessageEndpoint(Construct):
    """REST API returning the environment message under its own domain.

    Declares the message Lambda, a ``GET /message`` REST API on the ``prod``
    stage, a regional custom domain ``<record_name>.<zone_name>`` bound to the
    imported certificate and the Route 53 alias record pointing at it.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        provisioning: ProvisioningContext,
        environment: EnvironmentDescriptor,
    ) -> None:
        super().__init__(scope, construct_id)
        self.context = StackContext(scope=self, environment=environment.record_name)
        self.environment = environment
        domain_name = environment.fqdn(provisioning.zone_name)

        hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
            self,
            "HostedZone",
            hosted_zone_id=provisioning.hosted_zone_id,
            zone_name=provisioning.zone_name,
        )
        certificate = acm.Certificate.from_certificate_arn(
            self, "Certificate", provisioning.certificate_arn
        )

        self.function_log_group = self.context.build_log_group("Function")
        self.access_log_group = self.context.build_log_group(
            "Api", prefix=constants.API_GATEWAY_LOG_GROUP_PREFIX
        )

        self.function = self._build_message_lambda(log_group=self.function_log_group)
        self.api = self._build_rest_api(
            handler=self.function, access_log_group=self.access_log_group
        )
        self.domain = self._build_custom_domain(
            domain_name=domain_name, certificate=certificate
        )

        # Alias record <record_name>.<zone_name> -> API custom domain
        self.record = route53.ARecord(
            self,
            "Record",
            zone=hosted_zone,
            record_name=environment.record_name,
            target=route53.RecordTarget.from_alias(targets.ApiGatewayDomain(self.domain)),
        )

        self.endpoint = Endpoint(
            api_id=self.api.rest_api_id,
            stage_name=constants.STAGE_NAME,
            domain_name=domain_name,
        )

        CfnOutput(
            self,
            "Url",
            value=self.endpoint.url,
            description=f"Message endpoint of the {environment.record_name} environment",
        )

    def _build_message_lambda(self, log_group: logs.ILogGroup) -> _lambda.Function:
        layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            self.context.build_resource_id("LambdaPowerToolsLayer"),
            layer_version_arn=self.context.build_power_tools_layer_arn(),
        )
        return _lambda.Function(
            self,
            self.context.build_resource_id("Function"),
            function_name=self.context.build_resource_name("Function"),
            runtime=constants.PYTHON_RUNTIME,
            handler=constants.MESSAGE_HANDLER,
            code=_lambda.Code.from_asset(constants.LAMBDA_SRC),
            architecture=constants.DEFAULT_ARCHITECTURE,
            description=f"Returns the {self.environment.record_name} environment message",
            layers=[layer],
            environment={
                "LOG_LEVEL": "INFO",
                "MESSAGE": self.environment.message,
            },
            timeout=Duration.seconds(10),
            memory_size=128,
            tracing=_lambda.Tracing.ACTIVE,
            log_group=log_group,
        )

    def _build_rest_api(
        self, handler: _lambda.Function, access_log_group: logs.ILogGroup
    ) -> apigw.LambdaRestApi:
        """Create the REST API with an explicit GET /message route."""
        api = apigw.LambdaRestApi(
            self,
            "Api",
            rest_api_name=constants.REST_API_NAME.format(
                record_name=self.environment.record_name
            ),
            handler=cast(_lambda.IFunction, handler),
            proxy=False,
            cloud_watch_role=False,
            deploy_options=apigw.StageOptions(
                stage_name=constants.STAGE_NAME,
                logging_level=apigw.MethodLoggingLevel.INFO,
                data_trace_enabled=True,
                metrics_enabled=True,
                access_log_destination=apigw.LogGroupLogDestination(access_log_group),
                access_log_format=apigw.AccessLogFormat.clf(),
            ),
        )
        api.root.add_resource(constants.MESSAGE_RESOURCE_PATH).add_method("GET")
        return api

    def _build_custom_domain(
        self, domain_name: str, certificate: acm.ICertificate
    ) -> apigw.DomainName:
        domain = apigw.DomainName(
            self,
            "DomainName",
            domain_name=domain_name,
            certificate=certificate,
            endpoint_type=apigw.EndpointType.REGIONAL,
            security_policy=apigw.SecurityPolicy.TLS_1_2,
        )
        domain.add_base_path_mapping(self.api)
        return domain
