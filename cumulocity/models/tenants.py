"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tenant and tenant option models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.applications import Application
from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


class TenantStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


@dataclass
class ApplicationReferences(C8yModel):
    self_: Optional[str] = json_field("self")
    references: Optional[List[Application]] = None


@dataclass
class Tenant(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    domain: Optional[str] = None
    company: Optional[str] = None
    admin_email: Optional[str] = None
    admin_name: Optional[str] = None
    admin_pass: Optional[str] = None
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    allow_create_tenants: Optional[bool] = None
    parent: Optional[str] = None
    status: Optional[TenantStatus] = None
    creation_time: Optional[str] = None
    custom_properties: Optional[Dict[str, Any]] = None
    applications: Optional[ApplicationReferences] = None
    owned_applications: Optional[ApplicationReferences] = None


@dataclass
class TenantCollection(PagedCollection):
    tenants: Optional[List[Tenant]] = None


@dataclass
class CurrentTenant(C8yModel):
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    domain_name: Optional[str] = None
    allow_create_tenants: Optional[bool] = None
    custom_properties: Optional[Dict[str, Any]] = None
    applications: Optional[ApplicationReferences] = None


class TfaStrategy(str, Enum):
    SMS = "SMS"
    TOTP = "TOTP"


@dataclass
class TenantTfaData(C8yModel):
    enabled_on_system_level: Optional[bool] = None
    enabled_on_tenant_level: Optional[bool] = None
    enforced_on_system_level: Optional[bool] = None
    enforced_users_group: Optional[str] = None
    strategy: Optional[TfaStrategy] = None
    totp_enforced_on_tenant_level: Optional[bool] = None


@dataclass
class Option(C8yModel):
    """A tenant option, addressed by category and key."""

    category: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    self_: Optional[str] = json_field("self")


@dataclass
class OptionCollection(PagedCollection):
    options: Optional[List[Option]] = None


@dataclass
class CategoryKeyOption(C8yModel):
    value: Optional[str] = None


@dataclass
class ApplicationReferenceCollection(PagedCollection):
    references: Optional[List[Application]] = None


@dataclass
class SubscribedApplicationReference(C8yModel):
    """Body subscribing a tenant to an application, given by its ``self`` link."""

    application: Optional[Application] = None
