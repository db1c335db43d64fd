"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Applications API (``/application``): applications, their binaries and
versions, and the application the caller authenticates as.
"""

from __future__ import annotations

from typing import List, Optional

from cumulocity.api.base import (
    ERROR_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    ZIP_MEDIA_TYPE,
    BaseApi,
    accepts,
    segment,
    vnd,
)
from cumulocity.models.applications import (
    Application,
    ApplicationBinaries,
    ApplicationCollection,
    ApplicationSettings,
    ApplicationUserCollection,
    ApplicationVersion,
    ApplicationVersionCollection,
    ApplicationVersionTag,
    BootstrapUser,
)

CREATE_APPLICATION_CLEAR = (
    "owner",
    "globalTitle",
    "legacy",
    "dynamicOptionsUrl",
    "upgrade",
    "requiredRoles",
    "manifest",
    "rightDrawer",
    "roles",
    "availability",
    "contentSecurityPolicy",
    "resourcesUrl",
    "activeVersionId",
    "self",
    "id",
    "breadcrumbs",
)
UPDATE_APPLICATION_CLEAR = (
    "owner.self",
    "globalTitle",
    "legacy",
    "dynamicOptionsUrl",
    "upgrade",
    "requiredRoles",
    "manifest",
    "rightDrawer",
    "roles",
    "contentSecurityPolicy",
    "activeVersionId",
    "self",
    "id",
    "breadcrumbs",
)
UPDATE_CURRENT_APPLICATION_CLEAR = (
    "globalTitle",
    "legacy",
    "owner.self",
    "dynamicOptionsUrl",
    "upgrade",
    "activeVersionId",
    "manifest",
    "rightDrawer",
    "self",
    "id",
    "contentSecurityPolicy",
    "breadcrumbs",
)


def _application_path(application_id: str) -> str:
    return f"/application/applications/{segment(application_id)}"


class ApplicationsApi(BaseApi):
    """Hosted, microservice and external applications of the tenant."""

    async def get_applications(
        self,
        current_page: Optional[int] = None,
        name: Optional[str] = None,
        owner: Optional[str] = None,
        page_size: Optional[int] = None,
        provided_for: Optional[str] = None,
        subscriber: Optional[str] = None,
        tenant: Optional[str] = None,
        type: Optional[str] = None,
        user: Optional[str] = None,
        with_total_pages: Optional[bool] = None,
    ) -> ApplicationCollection:
        request = (
            self._request(
                "GET",
                "/application/applications",
                accepts(ERROR_MEDIA_TYPE, vnd("applicationcollection")),
            )
            .add_query_param("currentPage", current_page)
            .add_query_param("name", name)
            .add_query_param("owner", owner)
            .add_query_param("pageSize", page_size)
            .add_query_param("providedFor", provided_for)
            .add_query_param("subscriber", subscriber)
            .add_query_param("tenant", tenant)
            .add_query_param("type", type)
            .add_query_param("user", user)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=ApplicationCollection)

    async def create_application(self, application: Application) -> Application:
        request = (
            self._request(
                "POST", "/application/applications", accepts(ERROR_MEDIA_TYPE, vnd("application"))
            )
            .add_header("Content-Type", vnd("application"))
        )
        return await self._pipeline.execute(
            request, result_type=Application, body=application, clear=CREATE_APPLICATION_CLEAR
        )

    async def get_application(self, application_id: str) -> Application:
        request = self._request(
            "GET", _application_path(application_id), accepts(ERROR_MEDIA_TYPE, vnd("application"))
        )
        return await self._pipeline.execute(request, result_type=Application)

    async def update_application(self, application: Application, application_id: str) -> Application:
        request = (
            self._request(
                "PUT",
                _application_path(application_id),
                accepts(ERROR_MEDIA_TYPE, vnd("application")),
            )
            .add_header("Content-Type", vnd("application"))
        )
        return await self._pipeline.execute(
            request, result_type=Application, body=application, clear=UPDATE_APPLICATION_CLEAR
        )

    async def delete_application(self, application_id: str, force: Optional[bool] = None) -> bytes:
        """Delete an application; ``force`` also removes it from subscribed tenants."""
        request = (
            self._request("DELETE", _application_path(application_id), JSON_MEDIA_TYPE)
            .add_query_param("force", force)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def copy_application(self, application_id: str) -> Application:
        """Clone an application, including its active binary."""
        request = self._request(
            "POST",
            f"{_application_path(application_id)}/clone",
            accepts(ERROR_MEDIA_TYPE, vnd("application")),
        )
        return await self._pipeline.execute(request, result_type=Application)


class ApplicationBinariesApi(BaseApi):
    """Uploaded archives of hosted applications and microservices."""

    async def get_application_attachments(self, application_id: str) -> ApplicationBinaries:
        request = self._request(
            "GET",
            f"{_application_path(application_id)}/binaries",
            accepts(vnd("applicationbinaries"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=ApplicationBinaries)

    async def upload_application_attachment(
        self, data: bytes, application_id: str, filename: str = "application.zip"
    ) -> Application:
        """Upload a zip archive as the ``file`` part of a multipart body."""
        multipart = self._pipeline.multipart()
        multipart.add_part("file", data, ZIP_MEDIA_TYPE, filename=filename)
        request = self._request(
            "POST",
            f"{_application_path(application_id)}/binaries",
            accepts(ERROR_MEDIA_TYPE, vnd("application")),
        )
        return await self._pipeline.execute(request, result_type=Application, multipart=multipart)

    async def get_application_attachment(self, application_id: str, binary_id: str) -> bytes:
        request = self._request(
            "GET",
            f"{_application_path(application_id)}/binaries/{segment(binary_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def delete_application_attachment(self, application_id: str, binary_id: str) -> bytes:
        request = self._request(
            "DELETE",
            f"{_application_path(application_id)}/binaries/{segment(binary_id)}",
            JSON_MEDIA_TYPE,
        )
        return await self._pipeline.execute(request, result_type=bytes)


class ApplicationVersionsApi(BaseApi):
    """Versions of a hosted application, selected by version number or tag."""

    def _check_selector(self, version: Optional[str], tag: Optional[str]) -> None:
        if (version is None) == (tag is None):
            raise self._invalid("Exactly one of version or tag must be given")

    async def get_application_version(
        self,
        application_id: str,
        version: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> ApplicationVersion:
        self._check_selector(version, tag)
        request = (
            self._request(
                "GET",
                f"{_application_path(application_id)}/versions",
                accepts(ERROR_MEDIA_TYPE, vnd("applicationVersion")),
            )
            .add_query_param("version", version)
            .add_query_param("tag", tag)
        )
        return await self._pipeline.execute(request, result_type=ApplicationVersion)

    async def get_application_versions(self, application_id: str) -> ApplicationVersionCollection:
        request = self._request(
            "GET",
            f"{_application_path(application_id)}/versions",
            accepts(ERROR_MEDIA_TYPE, vnd("applicationVersionCollection")),
        )
        return await self._pipeline.execute(request, result_type=ApplicationVersionCollection)

    async def create_application_version(
        self,
        data: bytes,
        version: ApplicationVersion,
        application_id: str,
        filename: str = "application.zip",
    ) -> ApplicationVersion:
        """Upload a new version: the zip archive plus its version and tags."""
        multipart = self._pipeline.multipart()
        multipart.add_part("applicationBinary", data, ZIP_MEDIA_TYPE, filename=filename)
        multipart.add_part("applicationVersion", version, JSON_MEDIA_TYPE)
        request = self._request(
            "POST",
            f"{_application_path(application_id)}/versions",
            accepts(ERROR_MEDIA_TYPE, vnd("applicationVersion")),
        )
        return await self._pipeline.execute(
            request, result_type=ApplicationVersion, multipart=multipart
        )

    async def delete_application_version(
        self,
        application_id: str,
        version: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> bytes:
        self._check_selector(version, tag)
        request = (
            self._request("DELETE", f"{_application_path(application_id)}/versions", JSON_MEDIA_TYPE)
            .add_query_param("version", version)
            .add_query_param("tag", tag)
        )
        return await self._pipeline.execute(request, result_type=bytes)

    async def update_application_version(
        self, tags: ApplicationVersionTag, application_id: str, version: str
    ) -> ApplicationVersion:
        """Replace the tags of one version."""
        request = (
            self._request(
                "PUT",
                f"{_application_path(application_id)}/versions/{segment(version)}",
                accepts(ERROR_MEDIA_TYPE, vnd("applicationVersion")),
            )
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=ApplicationVersion, body=tags)


class CurrentApplicationApi(BaseApi):
    """The application whose credentials the client authenticates with."""

    async def get_current_application(self) -> Application:
        request = self._request(
            "GET", "/application/currentApplication", accepts(ERROR_MEDIA_TYPE, vnd("application"))
        )
        return await self._pipeline.execute(request, result_type=Application)

    async def update_current_application(self, application: Application) -> Application:
        request = (
            self._request(
                "PUT",
                "/application/currentApplication",
                accepts(ERROR_MEDIA_TYPE, vnd("application")),
            )
            .add_header("Content-Type", vnd("application"))
        )
        return await self._pipeline.execute(
            request,
            result_type=Application,
            body=application,
            clear=UPDATE_CURRENT_APPLICATION_CLEAR,
        )

    async def get_current_application_settings(self) -> List[ApplicationSettings]:
        request = self._request(
            "GET",
            "/application/currentApplication/settings",
            accepts(ERROR_MEDIA_TYPE, vnd("applicationsettings")),
        )
        return await self._pipeline.execute(request, result_type=List[ApplicationSettings])

    async def get_subscribed_users(self) -> ApplicationUserCollection:
        """Bootstrap users of the tenants subscribed to the current application."""
        request = self._request(
            "GET",
            "/application/currentApplication/subscriptions",
            accepts(vnd("applicationusercollection"), ERROR_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=ApplicationUserCollection)


class BootstrapUserApi(BaseApi):
    """Bootstrap user of a microservice application."""

    async def get_bootstrap_user(self, application_id: str) -> BootstrapUser:
        request = self._request(
            "GET",
            f"{_application_path(application_id)}/bootstrapUser",
            accepts(ERROR_MEDIA_TYPE, vnd("user")),
        )
        return await self._pipeline.execute(request, result_type=BootstrapUser)
