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
objectstorage.translator
~~~~~~~~~~~~~~~~~~~~~~~~

This module turns raw HTTP responses into typed results or errors.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import json
from typing import Callable, Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from .error import (AccessDenied, BucketAlreadyExists, BucketNotEmpty,
                    EntityTooLarge, InvalidArgument, NoSuchBucket, NoSuchKey,
                    NoSuchUpload, ObjectStorageError, ServerError)
from .transport import RawResponse
from .xml import fromstring, findtext

T = TypeVar("T")

BODY_EXCERPT_LENGTH = 256

ERROR_CLASSES: dict[str, Type[ObjectStorageError]] = {
    "NoSuchBucket": NoSuchBucket,
    "NoSuchKey": NoSuchKey,
    "NoSuchUpload": NoSuchUpload,
    "AccessDenied": AccessDenied,
    "BucketAlreadyExists": BucketAlreadyExists,
    "BucketAlreadyOwnedByYou": BucketAlreadyExists,
    "BucketNotEmpty": BucketNotEmpty,
    "EntityTooLarge": EntityTooLarge,
    "EntityTooSmall": InvalidArgument,
    "InvalidArgument": InvalidArgument,
    "InvalidBucketName": InvalidArgument,
    "InvalidPart": InvalidArgument,
    "InvalidPartOrder": InvalidArgument,
}

_ERROR_FIELDS = (
    "Code", "Message", "RequestId", "HostId", "Resource", "BucketName", "Key",
)


def _excerpt(data: bytes) -> str:
    return data[:BODY_EXCERPT_LENGTH].decode(errors="replace")


def _content_type(response: RawResponse) -> str:
    return response.headers.get("content-type", "").split(";")[0].strip()


def _parse_error_body(data: bytes, content_type: str) -> Optional[dict]:
    """Parse XML or JSON error document; return None if not one."""
    if content_type == "application/json":
        try:
            document = json.loads(data)
        except ValueError:
            return None
        if not isinstance(document, dict) or "Code" not in document:
            return None
        return {name: document.get(name) for name in _ERROR_FIELDS}

    try:
        element = fromstring(data)
    except ET.ParseError:
        return None
    if element.tag != "Error":
        return None
    return {name: findtext(element, name) for name in _ERROR_FIELDS}


class ResponseTranslator:
    """
    Translates raw responses.

    Successful responses go through the operation's decoder; every other
    response becomes exactly one :class:`ObjectStorageError`.
    """

    def translate(
            self,
            response: RawResponse,
            decoder: Optional[Callable[[ET.Element], T]] = None,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ) -> Optional[T]:
        """
        Return decoded result of a successful response or raise the error
        it carries.

        ``decoder`` receives the parsed XML body. Without decoder the body
        is discarded and None returned; use :meth:`check` to keep it.
        """
        self.check(response, bucket_name, object_name)
        if decoder is None:
            response.drain()
            return None

        data = response.data
        try:
            element = fromstring(data)
        except ET.ParseError as exc:
            raise self._unexpected(
                response, data, bucket_name, object_name,
            ) from exc

        # CompleteMultipartUpload may fail after sending 200 OK status.
        if element.tag == "Error":
            raise self._from_fields(
                {name: findtext(element, name) for name in _ERROR_FIELDS},
                response, bucket_name, object_name,
            )

        try:
            return decoder(element)
        except ValueError as exc:
            raise self._unexpected(
                response, data, bucket_name, object_name,
            ) from exc

    def check(
            self,
            response: RawResponse,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ) -> RawResponse:
        """Raise error of non-success response; return response otherwise."""
        if 200 <= response.status < 300:
            return response
        raise self.to_error(response, bucket_name, object_name)

    def to_error(
            self,
            response: RawResponse,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ) -> ObjectStorageError:
        """Build error of a non-success response; the body is consumed."""
        data = response.data
        if data:
            fields = _parse_error_body(data, _content_type(response))
            if fields is None:
                return self._unexpected(
                    response, data, bucket_name, object_name,
                )
            return self._from_fields(
                fields, response, bucket_name, object_name,
            )

        error_class: Type[ObjectStorageError] = ServerError
        message = f"server failed with HTTP status code {response.status}"
        if response.status == 404:
            if object_name:
                error_class, message = NoSuchKey, "Object does not exist"
            elif bucket_name:
                error_class, message = NoSuchBucket, "Bucket does not exist"
        elif response.status == 403:
            error_class, message = AccessDenied, "Access denied"
        elif response.status == 413:
            error_class, message = EntityTooLarge, "Request entity too large"

        return error_class(
            message,
            status_code=response.status,
            request_id=response.headers.get("x-amz-request-id"),
            host_id=response.headers.get("x-amz-id-2"),
            bucket_name=bucket_name,
            object_name=object_name,
        )

    @staticmethod
    def _from_fields(
            fields: dict,
            response: RawResponse,
            bucket_name: Optional[str],
            object_name: Optional[str],
    ) -> ObjectStorageError:
        code = fields.get("Code") or None
        error_class = ERROR_CLASSES.get(code or "", ServerError)
        return error_class(
            fields.get("Message"),
            code=code,
            status_code=response.status,
            request_id=(
                fields.get("RequestId") or
                response.headers.get("x-amz-request-id")
            ),
            host_id=fields.get("HostId") or response.headers.get("x-amz-id-2"),
            resource=fields.get("Resource"),
            bucket_name=fields.get("BucketName") or bucket_name,
            object_name=fields.get("Key") or object_name,
        )

    @staticmethod
    def _unexpected(
            response: RawResponse,
            data: bytes,
            bucket_name: Optional[str],
            object_name: Optional[str],
    ) -> ServerError:
        return ServerError(
            f"unexpected response body: {_excerpt(data)}",
            status_code=response.status,
            request_id=response.headers.get("x-amz-request-id"),
            bucket_name=bucket_name,
            object_name=object_name,
        )
