# -*- coding: utf-8 -*-
# Minimal object storage library for Amazon S3 Compatible Cloud Storage, (C)
# [2015] - [2025] MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
objectstorage.signer
~~~~~~~~~~~~~~~~~~~~

This module implements AWS Signature Version 4 request signing.

Signing is a pure function of the request, the credentials and the given
date; the caller supplies the date so identical inputs always produce an
identical signature.

:copyright: (c) 2015 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import hashlib
import hmac
import re
from datetime import datetime
from typing import MutableMapping
from urllib.parse import SplitResult

from . import time
from .credentials import Credentials
from .helpers import sha256_hash

SIGN_V4_ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE_NAME = "s3"
_MULTI_SPACE_REGEX = re.compile(r"( +)")
_UNSIGNED_HEADERS = ("authorization", "user-agent")


def _hmac_hash(key: bytes, data: bytes) -> bytes:
    """Return HMacSHA256 digest of given key and data."""
    return hmac.new(key, data, hashlib.sha256).digest()


def get_scope(date: datetime, region: str) -> str:
    """Get credential scope string."""
    return (
        f"{time.to_signer_date(date)}/{region}/{SERVICE_NAME}/aws4_request"
    )


def get_canonical_headers(
        headers: MutableMapping[str, str],
) -> tuple[str, str]:
    """Get canonical headers and signed headers list."""
    ordered_headers = {}
    for key, value in headers.items():
        key = key.lower()
        if key not in _UNSIGNED_HEADERS:
            ordered_headers[key] = _MULTI_SPACE_REGEX.sub(
                " ", str(value).strip(),
            )

    keys = sorted(ordered_headers)
    signed_headers = ";".join(keys)
    canonical_headers = "\n".join(
        f"{key}:{ordered_headers[key]}" for key in keys
    )
    return canonical_headers, signed_headers


def get_canonical_query_string(query: str) -> str:
    """Get canonical query string."""
    if not query:
        return ""
    return "&".join(
        "=".join(pair) for pair in sorted(
            param.split("=", 1) if "=" in param else [param, ""]
            for param in query.split("&")
        )
    )


def get_canonical_request(
        method: str,
        url: SplitResult,
        headers: MutableMapping[str, str],
        content_sha256: str,
) -> tuple[str, str]:
    """Get canonical request and signed headers."""
    canonical_headers, signed_headers = get_canonical_headers(headers)

    # CanonicalRequest =
    #   HTTPRequestMethod + '\n' +
    #   CanonicalURI + '\n' +
    #   CanonicalQueryString + '\n' +
    #   CanonicalHeaders + '\n\n' +
    #   SignedHeaders + '\n' +
    #   HexEncode(Hash(RequestPayload))
    canonical_request = (
        f"{method}\n"
        f"{url.path or '/'}\n"
        f"{get_canonical_query_string(url.query)}\n"
        f"{canonical_headers}\n\n"
        f"{signed_headers}\n"
        f"{content_sha256}"
    )
    return canonical_request, signed_headers


def get_string_to_sign(
        date: datetime,
        scope: str,
        canonical_request_hash: str,
) -> str:
    """Get string-to-sign."""
    return (
        f"{SIGN_V4_ALGORITHM}\n{time.to_amz_date(date)}\n{scope}\n"
        f"{canonical_request_hash}"
    )


def get_signing_key(secret_key: str, date: datetime, region: str) -> bytes:
    """Get signing key derived by date, region and service HMAC chain."""
    date_key = _hmac_hash(
        ("AWS4" + secret_key).encode(),
        time.to_signer_date(date).encode(),
    )
    date_region_key = _hmac_hash(date_key, region.encode())
    date_region_service_key = _hmac_hash(
        date_region_key, SERVICE_NAME.encode(),
    )
    return _hmac_hash(date_region_service_key, b"aws4_request")


def get_authorization(
        access_key: str,
        scope: str,
        signed_headers: str,
        signature: str,
) -> str:
    """Get authorization header value."""
    return (
        f"{SIGN_V4_ALGORITHM} Credential={access_key}/{scope}, "
        f"SignedHeaders={signed_headers}, Signature={signature}"
    )


def sign_v4_s3(
        method: str,
        url: SplitResult,
        region: str,
        headers: MutableMapping[str, str],
        credentials: Credentials,
        content_sha256: str,
        date: datetime,
) -> MutableMapping[str, str]:
    """Do signature V4 of given request and set Authorization header."""
    scope = get_scope(date, region)
    canonical_request, signed_headers = get_canonical_request(
        method, url, headers, content_sha256,
    )
    string_to_sign = get_string_to_sign(
        date, scope, sha256_hash(canonical_request),
    )
    signature = hmac.new(
        get_signing_key(credentials.secret_key, date, region),
        string_to_sign.encode(),
        hashlib.sha256,
    ).hexdigest()
    headers["Authorization"] = get_authorization(
        credentials.access_key, scope, signed_headers, signature,
    )
    return headers
