"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Trusted certificate models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from cumulocity.models.base import C8yModel, json_field
from cumulocity.models.common import PagedCollection


class TrustedCertificateStatus(str, Enum):
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


@dataclass
class TrustedCertificate(C8yModel):
    """A CA certificate devices of the tenant may authenticate with.

    Only ``cert_in_pem_format``, ``name``, ``status`` and
    ``auto_registration_enabled`` are written; the platform derives the
    other members from the certificate.
    """

    fingerprint: Optional[str] = None
    self_: Optional[str] = json_field("self")
    name: Optional[str] = None
    status: Optional[TrustedCertificateStatus] = None
    auto_registration_enabled: Optional[bool] = None
    cert_in_pem_format: Optional[str] = None
    algorithm_name: Optional[str] = None
    issuer: Optional[str] = None
    subject: Optional[str] = None
    serial_number: Optional[str] = None
    version: Optional[int] = None
    not_before: Optional[str] = None
    not_after: Optional[str] = None
    proof_of_possession_valid: Optional[bool] = None
    proof_of_possession_unsigned_verification_code: Optional[str] = None
    proof_of_possession_verification_code_usable_until: Optional[str] = None


@dataclass
class TrustedCertificateCollection(PagedCollection):
    certificates: Optional[List[TrustedCertificate]] = None


@dataclass
class SignedVerificationCode(C8yModel):
    """Verification code signed with the certificate's private key, base64 encoded."""

    proof_of_possession_signed_verification_code: Optional[str] = None
