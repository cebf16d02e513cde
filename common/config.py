"""Deployment configuration for the message API stack.

Inputs are read once at synth time, from the process environment first and
from CDK context (``cdk.json`` or ``-c key=value``) second.
"""
import os
from typing import Optional, Tuple

from attrs import define, field
from attrs.validators import instance_of
from constructs import Construct

import common.constants as constants
from common.models import ProvisioningContext


class ConfigurationError(ValueError):
    """Raised when the deployment inputs are missing or inconsistent."""


@define(slots=True, frozen=True, kw_only=True)
class DeploymentConfig:
    provisioning: ProvisioningContext = field(validator=instance_of(ProvisioningContext))
    edge_enabled: bool = field(default=False, validator=instance_of(bool))


def _read_input(scope: Construct, config_input: Tuple[str, str]) -> Optional[str]:
    env_var, context_key = config_input
    value = os.getenv(env_var)
    # Set-but-blank environment variables defer to CDK context
    if value is None or not value.strip():
        value = scope.node.try_get_context(context_key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _parse_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.lower() in constants.TRUTHY_VALUES


def load_deployment_config(scope: Construct) -> DeploymentConfig:
    required = {
        "hostedZoneId": _read_input(scope, constants.HOSTED_ZONE_ID_INPUT),
        "zoneName": _read_input(scope, constants.ZONE_NAME_INPUT),
        "acmARN": _read_input(scope, constants.ACM_ARN_INPUT),
    }
    missing = [name for name, value in required.items() if value is None]
    if missing:
        raise ConfigurationError(
            f"Missing deployment configuration: {', '.join(missing)}"
        )

    certificate_arn_edge = _read_input(scope, constants.ACM_US_ARN_INPUT)
    edge_enabled = _parse_flag(_read_input(scope, constants.EDGE_ENABLED_INPUT))
    if edge_enabled and certificate_arn_edge is None:
        raise ConfigurationError(
            "acmUsARN is required when the CloudFront edge layer is enabled"
        )

    return DeploymentConfig(
        provisioning=ProvisioningContext(
            hosted_zone_id=required["hostedZoneId"],
            zone_name=required["zoneName"],
            certificate_arn=required["acmARN"],
            certificate_arn_edge=certificate_arn_edge,
        ),
        edge_enabled=edge_enabled,
    )
