from aws_cdk import (
    CfnOutput,
    Stack,
    aws_certificatemanager as acm,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
    aws_route53 as route53,
    aws_route53_targets as targets,
)
from constructs import Construct

import common.constants as constants
from common.models import Endpoint, EnvironmentDescriptor, ProvisioningContext


class EdgeDistribution(Construct):
    """CloudFront distribution in front of a message endpoint's stage.

    The distribution answers on ``cloudfront-<record_name>.<zone_name>`` so it
    never shares a record with the direct API alias.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        provisioning: ProvisioningContext,
        environment: EnvironmentDescriptor,
        endpoint: Endpoint,
    ) -> None:
        super().__init__(scope, construct_id)
        if provisioning.certificate_arn_edge is None:
            raise ValueError(
                f"An {constants.EDGE_CERTIFICATE_REGION} certificate is required "
                f"to front {environment.record_name} with CloudFront"
            )
        self.domain_name = environment.edge_fqdn(provisioning.zone_name)

        hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
            self,
            "HostedZone",
            hosted_zone_id=provisioning.hosted_zone_id,
            zone_name=provisioning.zone_name,
        )
        certificate = acm.Certificate.from_certificate_arn(
            self, "CertificateUS", provisioning.certificate_arn_edge
        )

        origin_domain = constants.EXECUTE_API_DOMAIN.format(
            api_id=endpoint.api_id, region=Stack.of(self).region
        )
        self.distribution = cloudfront.Distribution(
            self,
            "CloudFront",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.HttpOrigin(origin_domain, origin_path=endpoint.origin_path),
                cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            domain_names=[self.domain_name],
            certificate=certificate,
            comment=f"Edge for {endpoint.domain_name}",
        )

        route53.ARecord(
            self,
            "CloudFrontRecord",
            zone=hosted_zone,
            record_name=environment.edge_record_name,
            target=route53.RecordTarget.from_alias(
                targets.CloudFrontTarget(self.distribution)
            ),
        )

        CfnOutput(
            self,
            "Url",
            value=f"https://{self.domain_name}/{constants.MESSAGE_RESOURCE_PATH}",
            description=f"CloudFront endpoint of the {environment.record_name} environment",
        )
