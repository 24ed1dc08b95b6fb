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
objectstorage.error
~~~~~~~~~~~~~~~~~~~

This module provides the exception classes raised by client operations.

Every failure surfaces as exactly one :class:`ObjectStorageError` subclass
carrying the error code, message, HTTP status and request ID when available.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

from typing import Optional


class ObjectStorageError(Exception):
    """Base object storage exception."""

    default_code: Optional[str] = None

    def __init__(  # pylint: disable=too-many-positional-arguments
            self,
            message: Optional[str] = None,
            code: Optional[str] = None,
            status_code: Optional[int] = None,
            request_id: Optional[str] = None,
            host_id: Optional[str] = None,
            resource: Optional[str] = None,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ):
        self.code = code or self.default_code
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        self.host_id = host_id
        self.resource = resource
        self.bucket_name = bucket_name
        self.object_name = object_name
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = f"code: {self.code}, message: {self.message}"
        if self.status_code is not None:
            text += f", status_code: {self.status_code}"
        if self.resource:
            text += f", resource: {self.resource}"
        if self.request_id:
            text += f", request_id: {self.request_id}"
        if self.host_id:
            text += f", host_id: {self.host_id}"
        if self.bucket_name:
            text += f", bucket_name: {self.bucket_name}"
        if self.object_name:
            text += f", object_name: {self.object_name}"
        return text

    def __reduce__(self):
        return type(self), (
            self.message,
            self.code,
            self.status_code,
            self.request_id,
            self.host_id,
            self.resource,
            self.bucket_name,
            self.object_name,
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"message={self.message!r}, status_code={self.status_code!r}, "
            f"request_id={self.request_id!r}, "
            f"bucket_name={self.bucket_name!r}, "
            f"object_name={self.object_name!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, ObjectStorageError):
            return NotImplemented
        return type(self) is type(other) and self.__reduce__() == \
            other.__reduce__()

    def __hash__(self):
        return hash(self.__reduce__()[1])


class InvalidArgument(ObjectStorageError, ValueError):
    """
    Raised to indicate an invalid argument; either detected locally before
    any request was sent or rejected by the server.
    """

    default_code = "InvalidArgument"


class InvalidState(ObjectStorageError):
    """Raised to indicate an operation not allowed in the upload's state."""

    default_code = "InvalidState"


class TransportError(ObjectStorageError):
    """Raised to indicate a network failure after retries are exhausted."""

    default_code = "TransportError"


class NoSuchBucket(ObjectStorageError):
    """Raised to indicate the bucket does not exist."""

    default_code = "NoSuchBucket"


class NoSuchKey(ObjectStorageError):
    """Raised to indicate the object does not exist."""

    default_code = "NoSuchKey"


class NoSuchUpload(ObjectStorageError):
    """Raised to indicate the multipart upload does not exist."""

    default_code = "NoSuchUpload"


class AccessDenied(ObjectStorageError):
    """Raised to indicate access to the resource is denied."""

    default_code = "AccessDenied"


class BucketAlreadyExists(ObjectStorageError):
    """Raised to indicate the bucket name is already taken."""

    default_code = "BucketAlreadyExists"


class EntityTooLarge(ObjectStorageError):
    """Raised to indicate the payload exceeds the allowed size."""

    default_code = "EntityTooLarge"


class ServerError(ObjectStorageError):
    """
    Raised to indicate an error response not covered by a specific error
    class, including responses whose body could not be parsed.
    """

    default_code = "ServerError"


class BucketNotEmpty(ServerError):
    """Raised to indicate the bucket to delete still has objects."""

    default_code = "BucketNotEmpty"
