"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Feature toggle models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cumulocity.models.base import C8yModel


class FeaturePhase(str, Enum):
    IN_DEVELOPMENT = "IN_DEVELOPMENT"
    PRIVATE_PREVIEW = "PRIVATE_PREVIEW"
    PUBLIC_PREVIEW = "PUBLIC_PREVIEW"
    GENERALLY_AVAILABLE = "GENERALLY_AVAILABLE"


class FeatureStrategy(str, Enum):
    DEFAULT = "DEFAULT"
    TENANT = "TENANT"


@dataclass
class FeatureToggle(C8yModel):
    """A platform feature and whether it is active for the current tenant.

    ``strategy`` tells whether ``active`` comes from the feature's default
    or from a value set for the tenant.
    """

    key: Optional[str] = None
    phase: Optional[FeaturePhase] = None
    active: Optional[bool] = None
    strategy: Optional[FeatureStrategy] = None


@dataclass
class FeatureToggleValue(C8yModel):
    active: Optional[bool] = None


@dataclass
class TenantFeatureToggleValue(C8yModel):
    tenant_id: Optional[str] = None
    active: Optional[bool] = None
