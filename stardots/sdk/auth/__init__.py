"""Request authentication."""

from .signer import (
    Credentials,
    RequestSigner,
    SignedHeaders,
    build_extra,
    compute_sign,
    sign_request,
)

__all__ = [
    "Credentials",
    "RequestSigner",
    "SignedHeaders",
    "build_extra",
    "compute_sign",
    "sign_request",
]
