"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Application models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


class ApplicationType(str, Enum):
    EXTERNAL = "EXTERNAL"
    HOSTED = "HOSTED"
    MICROSERVICE = "MICROSERVICE"


class ApplicationAvailability(str, Enum):
    MARKET = "MARKET"
    PRIVATE = "PRIVATE"
    SHARED = "SHARED"


@dataclass
class TenantReference(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")


@dataclass
class ApplicationOwner(C8yModel):
    self_: Optional[str] = json_field("self")
    tenant: Optional[TenantReference] = None


@dataclass
class Application(C8yModel):
    id: Optional[str] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    key: Optional[str] = None
    type: Optional[ApplicationType] = None
    availability: Optional[ApplicationAvailability] = None
    context_path: Optional[str] = None
    resources_url: Optional[str] = None
    active_version_id: Optional[str] = None
    global_title: Optional[str] = None
    legacy: Optional[bool] = None
    dynamic_options_url: Optional[str] = None
    upgrade: Optional[bool] = None
    right_drawer: Optional[bool] = None
    content_security_policy: Optional[str] = None
    breadcrumbs: Optional[bool] = None
    owner: Optional[ApplicationOwner] = None
    required_roles: Optional[List[str]] = None
    roles: Optional[List[str]] = None
    manifest: Optional[Dict[str, Any]] = None


@dataclass
class ApplicationCollection(PagedCollection):
    applications: Optional[List[Application]] = None


@dataclass
class ApplicationAttachment(C8yModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    context_path: Optional[str] = None
    created: Optional[str] = None
    length: Optional[int] = None
    download_url: Optional[str] = None


@dataclass
class ApplicationBinaries(C8yModel):
    attachments: Optional[List[ApplicationAttachment]] = None


@dataclass
class ApplicationVersion(C8yModel):
    version: Optional[str] = None
    binary_id: Optional[str] = None
    tag: Optional[List[str]] = None


@dataclass
class ApplicationVersionCollection(PagedCollection):
    application_versions: Optional[List[ApplicationVersion]] = None


@dataclass
class ApplicationVersionTag(C8yModel):
    tag: Optional[List[str]] = None


@dataclass
class ApplicationSettingSchema(C8yModel):
    type: Optional[str] = None


@dataclass
class ApplicationSettings(C8yModel):
    key: Optional[str] = None
    value_schema: Optional[ApplicationSettingSchema] = None
    default_value: Optional[str] = None
    editable: Optional[bool] = None
    inherit_from_owner: Optional[bool] = None


@dataclass
class ApplicationUser(C8yModel):
    """Service user of a microservice subscription."""

    name: Optional[str] = None
    password: Optional[str] = None
    tenant: Optional[str] = None


@dataclass
class ApplicationUserCollection(C8yModel):
    users: Optional[List[ApplicationUser]] = None


@dataclass
class BootstrapUser(C8yModel):
    """Credentials a microservice uses to read its tenant subscriptions."""

    name: Optional[str] = None
    password: Optional[str] = None
    tenant: Optional[str] = None
