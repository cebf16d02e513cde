"""Configuration values shared by the message API constructs.

Everything here is declared once and never mutated: the provisioning context
is read at startup, each environment descriptor names one endpoint, and an
endpoint is what the REST API construct hands on to the edge layer.
"""
from collections import Counter
from typing import Iterable, Optional

from attrs import define, field
from attrs.validators import instance_of, matches_re, min_len, optional

import common.constants as constants

DNS_LABEL = r"[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?"


def _strip_trailing_dot(zone_name: str) -> str:
    return zone_name.rstrip(".") if isinstance(zone_name, str) else zone_name


@define(slots=True, frozen=True, kw_only=True)
class ProvisioningContext:
    hosted_zone_id: str = field(validator=[instance_of(str), min_len(1)])
    zone_name: str = field(
        converter=_strip_trailing_dot, validator=[instance_of(str), min_len(1)]
    )
    certificate_arn: str = field(
        validator=[instance_of(str), min_len(1)],
        metadata={"description": "Regional certificate for the API custom domains"},
    )
    certificate_arn_edge: Optional[str] = field(
        default=None,
        validator=optional([instance_of(str), min_len(1)]),
        metadata={"description": "us-east-1 certificate for CloudFront"},
    )


@define(slots=True, frozen=True, kw_only=True)
class EnvironmentDescriptor:
    message: str = field(validator=instance_of(str))
    record_name: str = field(validator=[instance_of(str), matches_re(DNS_LABEL)])

    @property
    def edge_record_name(self) -> str:
        return f"{constants.EDGE_RECORD_PREFIX}-{self.record_name}"

    def fqdn(self, zone_name: str) -> str:
        return f"{self.record_name}.{zone_name}"

    def edge_fqdn(self, zone_name: str) -> str:
        return f"{self.edge_record_name}.{zone_name}"


@define(slots=True, frozen=True, kw_only=True)
class Endpoint:
    api_id: str = field(validator=instance_of(str))
    stage_name: str = field(validator=instance_of(str))
    domain_name: str = field(validator=instance_of(str))

    @property
    def origin_path(self) -> str:
        return f"/{self.stage_name}"

    @property
    def url(self) -> str:
        return f"https://{self.domain_name}/{constants.MESSAGE_RESOURCE_PATH}"


def ensure_unique_record_names(record_names: Iterable[str]) -> None:
    """Raise if two records would claim the same name in the zone."""
    duplicates = sorted(
        name for name, count in Counter(record_names).items() if count > 1
    )
    if duplicates:
        raise ValueError(
            f"Record names must be unique within the hosted zone, duplicated: {', '.join(duplicates)}"
        )
