"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Trusted certificates API (``/tenant/tenants/{tenantId}/trusted-certificates``).

A certificate is addressed by its fingerprint. Uploading one does not make
it usable for device registration until possession of its private key has
been proven: request a verification code, sign it, send the signature with
:meth:`TrustedCertificatesApi.prove_certificate_possession`. Platform
operators may instead confirm the certificate directly.
"""

from __future__ import annotations

from typing import Optional

from cumulocity.api.base import ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE, BaseApi, accepts, segment
from cumulocity.models.certificates import (
    SignedVerificationCode,
    TrustedCertificate,
    TrustedCertificateCollection,
)

ADD_CERTIFICATE_CLEAR = (
    "notAfter",
    "serialNumber",
    "subject",
    "fingerprint",
    "self",
    "algorithmName",
    "version",
    "issuer",
    "notBefore",
)
UPDATE_CERTIFICATE_CLEAR = ADD_CERTIFICATE_CLEAR + ("certInPemFormat",)
ADD_CERTIFICATES_CLEAR = ("next", "prev", "self", "statistics")


def _certificates_path(tenant_id: str, fingerprint: Optional[str] = None) -> str:
    path = f"/tenant/tenants/{segment(tenant_id)}/trusted-certificates"
    return path if fingerprint is None else f"{path}/{segment(fingerprint)}"


def _possession_path(tenant_id: str, fingerprint: str, step: str) -> str:
    return f"/tenant/tenants/{segment(tenant_id)}/trusted-certificates-pop/{segment(fingerprint)}/{step}"


class TrustedCertificatesApi(BaseApi):
    """CA certificates devices of a tenant authenticate with."""

    async def get_trusted_certificates(
        self,
        tenant_id: str,
        current_page: Optional[int] = None,
        page_size: Optional[int] = None,
        with_total_elements: Optional[bool] = None,
        with_total_pages: Optional[bool] = None,
    ) -> TrustedCertificateCollection:
        request = (
            self._request("GET", _certificates_path(tenant_id), accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE))
            .add_query_param("currentPage", current_page)
            .add_query_param("pageSize", page_size)
            .add_query_param("withTotalElements", with_total_elements)
            .add_query_param("withTotalPages", with_total_pages)
        )
        return await self._pipeline.execute(request, result_type=TrustedCertificateCollection)

    async def add_trusted_certificate(
        self, certificate: TrustedCertificate, tenant_id: str
    ) -> TrustedCertificate:
        request = (
            self._request("POST", _certificates_path(tenant_id), accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE))
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, result_type=TrustedCertificate, body=certificate, clear=ADD_CERTIFICATE_CLEAR
        )

    async def add_trusted_certificates(
        self, certificates: TrustedCertificateCollection, tenant_id: str
    ) -> TrustedCertificateCollection:
        """Upload several certificates in one request."""
        request = (
            self._request(
                "POST",
                f"{_certificates_path(tenant_id)}/bulk",
                accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request,
            result_type=TrustedCertificateCollection,
            body=certificates,
            clear=ADD_CERTIFICATES_CLEAR,
        )

    async def get_trusted_certificate(self, tenant_id: str, fingerprint: str) -> TrustedCertificate:
        request = self._request(
            "GET", _certificates_path(tenant_id, fingerprint), accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=TrustedCertificate)

    async def update_trusted_certificate(
        self, certificate: TrustedCertificate, tenant_id: str, fingerprint: str
    ) -> TrustedCertificate:
        """Rename, enable or disable a certificate; the certificate itself cannot change."""
        request = (
            self._request(
                "PUT", _certificates_path(tenant_id, fingerprint), accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE)
            )
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(
            request, result_type=TrustedCertificate, body=certificate, clear=UPDATE_CERTIFICATE_CLEAR
        )

    async def remove_trusted_certificate(self, tenant_id: str, fingerprint: str) -> bytes:
        request = self._request("DELETE", _certificates_path(tenant_id, fingerprint), JSON_MEDIA_TYPE)
        return await self._pipeline.execute(request, result_type=bytes)

    async def prove_certificate_possession(
        self, code: SignedVerificationCode, tenant_id: str, fingerprint: str
    ) -> TrustedCertificate:
        request = (
            self._request(
                "POST",
                _possession_path(tenant_id, fingerprint, "pop"),
                accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
            )
            .add_header("Content-Type", JSON_MEDIA_TYPE)
        )
        return await self._pipeline.execute(request, result_type=TrustedCertificate, body=code)

    async def confirm_certificate(self, tenant_id: str, fingerprint: str) -> TrustedCertificate:
        """Mark possession as proven without a signed code (platform operators only)."""
        request = self._request(
            "POST",
            _possession_path(tenant_id, fingerprint, "confirmed"),
            accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=TrustedCertificate)

    async def generate_verification_code(self, tenant_id: str, fingerprint: str) -> TrustedCertificate:
        """Issue a new verification code; it is returned in the certificate's body."""
        request = self._request(
            "POST",
            _possession_path(tenant_id, fingerprint, "verification-code"),
            accepts(ERROR_MEDIA_TYPE, JSON_MEDIA_TYPE),
        )
        return await self._pipeline.execute(request, result_type=TrustedCertificate)
