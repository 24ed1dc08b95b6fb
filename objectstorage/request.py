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
objectstorage.request
~~~~~~~~~~~~~~~~~~~~~

This module builds signed request descriptors for S3 operations.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import BinaryIO, Callable, Optional, Union
from urllib.parse import SplitResult, urlunsplit

from urllib3._collections import HTTPHeaderDict

from . import time
from .credentials import Credentials
from .error import InvalidArgument
from .helpers import (_DEFAULT_USER_AGENT, Endpoint, check_bucket_name,
                      check_object_name, md5sum_hash, sha256_hash)
from .reader import SectionReader
from .signer import sign_v4_s3

UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"
ZERO_SHA256_HASH = sha256_hash(b"")
IDEMPOTENT_METHODS = frozenset(["GET", "HEAD", "PUT"])
_HASH_CHUNK_SIZE = 64 * 1024

Body = Union[bytes, BinaryIO, None]


@dataclass
class RequestDescriptor:
    """A fully built and signed HTTP request."""

    method: str
    url: SplitResult
    headers: HTTPHeaderDict
    body: Body = None
    content_length: int = 0
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    query_params: dict[str, str] = field(default_factory=dict)

    @property
    def full_url(self) -> str:
        """Get URL as string."""
        return urlunsplit(self.url)

    @property
    def is_idempotent(self) -> bool:
        """Check whether sending this request twice is harmless."""
        return self.method in IDEMPOTENT_METHODS

    @property
    def is_replayable(self) -> bool:
        """Check whether the body can be sent again on retry."""
        if self.body is None or isinstance(self.body, bytes):
            return True
        seekable = getattr(self.body, "seekable", None)
        return bool(seekable and seekable())


def _stream_sha256(stream: BinaryIO) -> str:
    """Compute SHA-256 of a seekable stream and rewind it."""
    hasher = hashlib.sha256()
    position = stream.tell()
    while True:
        data = stream.read(_HASH_CHUNK_SIZE)
        if not data:
            break
        hasher.update(data)
    stream.seek(position)
    return hasher.hexdigest()


class RequestBuilder:
    """
    Builds :class:`RequestDescriptor` for an endpoint and credentials.

    The builder holds no mutable state; ``clock`` is called once per request
    unless an explicit ``date`` is given to :meth:`build`.
    """

    def __init__(
            self,
            endpoint: Endpoint,
            credentials: Optional[Credentials] = None,
            user_agent: str = _DEFAULT_USER_AGENT,
            clock: Callable[[], datetime] = time.utcnow,
    ):
        self._endpoint = endpoint
        self._credentials = credentials
        self._user_agent = user_agent
        self._clock = clock

    @property
    def endpoint(self) -> Endpoint:
        """Get endpoint."""
        return self._endpoint

    def with_user_agent(self, user_agent: str) -> RequestBuilder:
        """Return a copy of this builder using given User-Agent."""
        return RequestBuilder(
            self._endpoint, self._credentials, user_agent, self._clock,
        )

    def build(  # pylint: disable=too-many-positional-arguments
            self,
            method: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            query_params: Optional[dict[str, str]] = None,
            headers: Optional[HTTPHeaderDict] = None,
            body: Body = None,
            length: Optional[int] = None,
            date: Optional[datetime] = None,
    ) -> RequestDescriptor:
        """Validate names, hash payload and sign the request."""
        if object_name is not None and not bucket_name:
            raise InvalidArgument(
                f"empty bucket name for object name {object_name}",
                object_name=object_name,
            )
        if bucket_name is not None:
            check_bucket_name(bucket_name)
        if object_name is not None:
            check_object_name(object_name)

        headers = HTTPHeaderDict(headers or {})
        query_params = dict(query_params or {})
        url = self._endpoint.build_url(
            method, bucket_name, object_name, query_params,
        )

        if body is None:
            content_length = 0
            content_sha256 = ZERO_SHA256_HASH
        elif isinstance(body, bytes):
            content_length = len(body)
            content_sha256 = sha256_hash(body)
            headers["Content-MD5"] = str(md5sum_hash(body))
        else:
            if length is None or length < 0:
                raise InvalidArgument(
                    "length must be provided for stream data",
                    bucket_name=bucket_name,
                    object_name=object_name,
                )
            body = SectionReader(body, length)
            content_length = length
            content_sha256 = (
                _stream_sha256(body) if body.seekable() else UNSIGNED_PAYLOAD
            )

        if method in ("PUT", "POST"):
            headers["Content-Length"] = str(content_length)
            if not headers.get("Content-Type"):
                headers["Content-Type"] = "application/octet-stream"

        date = date or self._clock()
        headers["Host"] = url.netloc
        headers["User-Agent"] = self._user_agent
        headers["x-amz-content-sha256"] = content_sha256
        headers["x-amz-date"] = time.to_amz_date(date)

        if self._credentials is not None:
            if self._credentials.session_token:
                headers["X-Amz-Security-Token"] = (
                    self._credentials.session_token
                )
            sign_v4_s3(
                method=method,
                url=url,
                region=self._endpoint.region,
                headers=headers,
                credentials=self._credentials,
                content_sha256=content_sha256,
                date=date,
            )

        return RequestDescriptor(
            method=method,
            url=url,
            headers=headers,
            body=body,
            content_length=content_length,
            bucket_name=bucket_name,
            object_name=object_name,
            query_params=query_params,
        )
