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

"""Helper functions."""

from __future__ import absolute_import, annotations

import base64
import hashlib
import platform
import re
import urllib.parse
from dataclasses import dataclass
from typing import Mapping, Optional

from . import __title__, __version__
from .error import InvalidArgument

_DEFAULT_USER_AGENT = (
    f"ObjectStorage ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

DEFAULT_REGION = "us-east-1"
MAX_MULTIPART_COUNT = 10000  # 10000 parts
MAX_PART_SIZE = 5 * 1024 * 1024 * 1024  # 5GiB
MAX_OBJECT_SIZE = 5 * 1024 * 1024 * 1024  # 5GiB, single PUT limit
MAX_OBJECT_NAME_LENGTH = 1024

_BUCKET_NAME_REGEX = re.compile(r'^[a-z0-9][a-z0-9\.\-]{1,61}[a-z0-9]$')
_IPV4_REGEX = re.compile(
    r'^((25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])\.){3}'
    r'(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])$')
_REGION_REGEX = re.compile(r'^((?!_)(?!-)[a-z_\d-]{1,63}(?<!-)(?<!_))$',
                           re.IGNORECASE)
_CREDENTIAL_REGEX = re.compile(r"Credential=([^/]+)")
_SIGNATURE_REGEX = re.compile(r"Signature=([0-9a-f]+)")


def quote(
        resource: str | bytes,
        safe: str = "/",
) -> str:
    """
    Wrapper to urllib.parse.quote() keeping '~' unescaped as required by
    SignatureV4.
    """
    return urllib.parse.quote(resource, safe=safe).replace("%7E", "~")


def queryencode(query: str | bytes) -> str:
    """Encode query parameter key or value."""
    return quote(query, safe="")


def sha256_hash(data: str | bytes | None) -> str:
    """Compute SHA-256 of data and return hash as hex encoded value."""
    data = data or b""
    return hashlib.sha256(
        data.encode() if isinstance(data, str) else data,
    ).hexdigest()


def md5sum_hash(data: str | bytes | None) -> str | None:
    """Compute MD5 of data and return hash as Base64 encoded value."""
    if data is None:
        return None

    # md5 is used for integrity only, not in a security context.
    hasher = hashlib.new("md5", usedforsecurity=False)
    hasher.update(data.encode() if isinstance(data, str) else data)
    return base64.b64encode(hasher.digest()).decode()


def headers_to_strings(
        headers: Mapping[str, str],
        titled_key: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string with secrets redacted."""
    values = []
    for key, value in headers.items():
        key = key.title() if titled_key else key
        value = _CREDENTIAL_REGEX.sub(
            "Credential=*REDACTED*",
            _SIGNATURE_REGEX.sub("Signature=*REDACTED*", str(value)),
        )
        values.append(f"{key}: {value}")
    return "\n".join(values)


def check_bucket_name(bucket_name: str):
    """Check whether bucket name is valid; raise InvalidArgument if not."""
    if not isinstance(bucket_name, str):
        raise InvalidArgument(
            f"bucket name must be str, not {type(bucket_name).__name__}",
        )

    if not _BUCKET_NAME_REGEX.match(bucket_name):
        raise InvalidArgument(
            f"invalid bucket name {bucket_name}", bucket_name=bucket_name,
        )

    if _IPV4_REGEX.match(bucket_name):
        raise InvalidArgument(
            f"bucket name {bucket_name} must not be formatted as an IP "
            "address",
            bucket_name=bucket_name,
        )

    if any(x in bucket_name for x in ("..", ".-", "-.")):
        raise InvalidArgument(
            f"bucket name {bucket_name} contains invalid successive "
            "characters",
            bucket_name=bucket_name,
        )


def check_object_name(object_name: str):
    """Check whether object name is valid; raise InvalidArgument if not."""
    if not isinstance(object_name, str):
        raise InvalidArgument(
            f"object name must be str, not {type(object_name).__name__}",
        )

    if not object_name.strip():
        raise InvalidArgument("object name must not be empty")

    if len(object_name.encode()) > MAX_OBJECT_NAME_LENGTH:
        raise InvalidArgument(
            f"object name must not exceed {MAX_OBJECT_NAME_LENGTH} bytes",
            object_name=object_name,
        )


def check_part_number(part_number: int):
    """Check part number is within [1, MAX_MULTIPART_COUNT]."""
    if (
            not isinstance(part_number, int) or
            isinstance(part_number, bool) or
            not 1 <= part_number <= MAX_MULTIPART_COUNT
    ):
        raise InvalidArgument(
            f"part number {part_number} must be an integer between 1 and "
            f"{MAX_MULTIPART_COUNT}",
        )


def _parse_host(endpoint: str, secure: bool) -> str:
    """Validate host[:port] endpoint and return netloc without default port."""
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise InvalidArgument("endpoint must be a non-empty string")

    scheme = "https" if secure else "http"
    url = urllib.parse.urlsplit(f"{scheme}://{endpoint}")

    if url.path and url.path != "/":
        raise InvalidArgument("path in endpoint is not allowed")

    if url.query:
        raise InvalidArgument("query in endpoint is not allowed")

    if url.fragment:
        raise InvalidArgument("fragment in endpoint is not allowed")

    if url.username or url.password:
        raise InvalidArgument("user info in endpoint is not allowed")

    try:
        port = url.port
    except ValueError as exc:
        raise InvalidArgument("invalid port") from exc

    if not url.hostname:
        raise InvalidArgument(f"invalid endpoint {endpoint}")

    if (secure and port == 443) or (not secure and port == 80):
        return url.hostname
    return url.netloc


@dataclass(frozen=True)
class Endpoint:
    """
    S3 service endpoint.

    Holds the host, the region used for signing, whether TLS is used and
    the addressing style: path-style ``https://host/bucket/key`` or
    virtual-host style ``https://bucket.host/key``.
    """

    host: str
    region: str = DEFAULT_REGION
    secure: bool = True
    virtual_style: bool = False

    @classmethod
    def parse(
            cls,
            endpoint: str,
            secure: bool = True,
            region: Optional[str] = None,
            virtual_style: bool = False,
    ) -> Endpoint:
        """Create endpoint from 'host[:port]' string."""
        if region and not _REGION_REGEX.match(region):
            raise InvalidArgument(f"invalid region {region}")
        return cls(
            host=_parse_host(endpoint, secure),
            region=region or DEFAULT_REGION,
            secure=secure,
            virtual_style=virtual_style,
        )

    @property
    def scheme(self) -> str:
        """Get URL scheme."""
        return "https" if self.secure else "http"

    def build_url(
            self,
            method: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            query_params: Optional[Mapping[str, str]] = None,
    ) -> urllib.parse.SplitResult:
        """Build URL for given bucket, object and query parameters."""
        query = "&".join(
            f"{queryencode(key)}={queryencode(value)}"
            for key, value in sorted((query_params or {}).items())
        )

        netloc = self.host
        path = "/"
        if bucket_name:
            enforce_path_style = (
                # CreateBucket API requires path style.
                (method == "PUT" and not object_name and not query_params) or

                # Bucket name containing '.' breaks TLS certificate
                # validation of virtual-host style.
                ("." in bucket_name and self.secure)
            )
            if enforce_path_style or not self.virtual_style:
                path = f"/{bucket_name}"
            else:
                netloc = f"{bucket_name}.{netloc}"
            if object_name:
                path += ("" if path.endswith("/") else "/") + quote(
                    object_name,
                )

        return urllib.parse.SplitResult(self.scheme, netloc, path, query, "")


def metadata_to_headers(metadata: Optional[Mapping[str, str]]) -> dict:
    """Convert user metadata to 'X-Amz-Meta-' prefixed headers."""
    headers = {}
    for key, value in (metadata or {}).items():
        if not key.lower().startswith("x-amz-meta-"):
            key = "X-Amz-Meta-" + key
        value = str(value)
        try:
            value.encode("us-ascii")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(
                f"unsupported metadata value {value}; "
                f"only US-ASCII encoded characters are supported"
            ) from exc
        headers[key] = value
    return headers
