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
objectstorage.transport
~~~~~~~~~~~~~~~~~~~~~~~

This module executes request descriptors over HTTP(S).

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import os
from typing import Any, Callable, Iterator, Optional

import certifi
import urllib3
from typing_extensions import Protocol
from urllib3 import Retry
from urllib3._collections import HTTPHeaderDict
from urllib3.exceptions import HTTPError
from urllib3.util import Timeout

from .error import TransportError
from .request import IDEMPOTENT_METHODS, RequestDescriptor

DEFAULT_TIMEOUT = 300  # seconds
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.2
_CHUNK_SIZE = 64 * 1024


class RawResponse:
    """
    Status, headers and lazily read body of an HTTP response.

    ``body`` is either bytes or a file-like object with ``read(amt)``;
    ``release`` is called once the body is consumed or the response closed.
    """

    def __init__(
            self,
            status: int,
            headers: Optional[HTTPHeaderDict] = None,
            body: Any = None,
            release: Optional[Callable[[], None]] = None,
    ):
        self.status = status
        self.headers = HTTPHeaderDict(headers or {})
        self._body = body
        self._release = release
        self._data: Optional[bytes] = None
        self._exhausted = False
        self._closed = False

    @property
    def data(self) -> bytes:
        """Read whole body and release the connection."""
        if self._data is None:
            if self._body is None or isinstance(self._body, bytes):
                self._data = self._body or b""
            else:
                self._data = b"".join(self.stream())
            self.close()
        return self._data

    def read(self, amt: Optional[int] = None) -> bytes:
        """Read up to amt bytes from the body."""
        if self._closed or self._body is None:
            return b""
        if isinstance(self._body, bytes):
            data = self._body if amt is None else self._body[:amt]
            self._body = self._body[len(data):]
        else:
            try:
                data = self._body.read(amt) if amt is not None else \
                    self._body.read()
            except (HTTPError, OSError) as exc:
                # Connection is unusable after a partial read.
                self.close()
                raise TransportError(
                    f"reading response body failed: {exc}",
                ) from exc
        if not data:
            self._exhausted = True
            self.close()
        return data or b""

    def stream(self, chunk_size: int = _CHUNK_SIZE) -> Iterator[bytes]:
        """Iterate body in chunks."""
        while True:
            data = self.read(chunk_size)
            if not data:
                break
            yield data

    def drain(self):
        """Discard remaining body and release the connection for reuse."""
        for _ in self.stream():
            pass
        self.close()

    def close(self):
        """Close the body and release the underlying connection."""
        if self._closed:
            return
        self._closed = True
        if not self._exhausted and hasattr(self._body, "close"):
            self._body.close()
        if self._release:
            self._release()


class Transport(Protocol):
    """typing stub for anything able to send a request descriptor."""

    def send(self, request: RequestDescriptor) -> RawResponse:
        """Send request and return raw response."""


class HTTPTransport:
    """
    urllib3 based transport.

    Connections are pooled by the ``urllib3.PoolManager`` which is safe to
    share between threads. Idempotent requests with a replayable body are
    retried on connection failures with exponential backoff; other requests
    are sent exactly once.
    """

    def __init__(
            self,
            http_client: Optional[urllib3.PoolManager] = None,
            cert_check: bool = True,
            timeout: float = DEFAULT_TIMEOUT,
            max_retries: int = DEFAULT_MAX_RETRIES,
            backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
            maxsize: int = 10,
    ):
        # Validate http client has correct base class.
        if http_client and not isinstance(http_client, urllib3.PoolManager):
            raise TypeError(
                "HTTP client should be urllib3.PoolManager like object, "
                f"got {type(http_client).__name__}",
            )
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")

        self._retry = Retry(
            total=max_retries,
            connect=max_retries,
            read=max_retries,
            redirect=0,
            status=0,
            backoff_factor=backoff_factor,
            allowed_methods=IDEMPOTENT_METHODS,
            raise_on_redirect=False,
            raise_on_status=False,
        )
        self._no_retry = Retry(
            total=0, redirect=0, raise_on_redirect=False,
            raise_on_status=False,
        )

        # Load CA certificates from SSL_CERT_FILE file if set
        self._http = http_client or urllib3.PoolManager(
            timeout=Timeout(connect=timeout, read=timeout),
            maxsize=maxsize,
            cert_reqs="CERT_REQUIRED" if cert_check else "CERT_NONE",
            ca_certs=os.environ.get("SSL_CERT_FILE") or certifi.where(),
        )

    def send(self, request: RequestDescriptor) -> RawResponse:
        """Send request and return response with unread body."""
        retries = (
            self._retry
            if request.is_idempotent and request.is_replayable
            else self._no_retry
        )
        try:
            response = self._http.urlopen(
                request.method,
                request.full_url,
                body=request.body,
                headers=request.headers,
                retries=retries,
                redirect=False,
                preload_content=False,
            )
        except HTTPError as exc:
            raise TransportError(
                f"{request.method} {request.url.path} failed: {exc}",
                bucket_name=request.bucket_name,
                object_name=request.object_name,
            ) from exc

        return RawResponse(
            status=response.status,
            headers=response.headers,
            body=response,
            release=response.release_conn,
        )

    def close(self):
        """Close all pooled connections."""
        self._http.clear()
