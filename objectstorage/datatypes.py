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
Results of bucket, object and multipart upload APIs.
"""

from __future__ import absolute_import, annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Mapping, Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from .time import from_http_header, from_iso8601utc
from .transport import RawResponse
from .xml import find, findall, findtext

_META_PREFIX = "x-amz-meta-"


def _etag(value: Optional[str]) -> Optional[str]:
    return None if value is None else value.replace('"', "")


def _is_true(value: Optional[str]) -> bool:
    return (value or "").lower() == "true"


@dataclass(frozen=True)
class Bucket:
    """Bucket information."""
    name: str
    creation_date: Optional[datetime] = None


def parse_list_buckets(element: ET.Element) -> list[Bucket]:
    """Parse ListAllMyBucketsResult into buckets ordered by name."""
    element = cast(ET.Element, find(element, "Buckets", True))
    buckets = []
    for bucket in findall(element, "Bucket"):
        creation_date = findtext(bucket, "CreationDate")
        buckets.append(Bucket(
            cast(str, findtext(bucket, "Name", True)),
            from_iso8601utc(creation_date) if creation_date else None,
        ))
    return sorted(buckets, key=lambda bucket: bucket.name)


B = TypeVar("B", bound="Object")


@dataclass(frozen=True)
class Object:
    """Object information."""
    bucket_name: str
    object_name: str
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    size: Optional[int] = None
    storage_class: Optional[str] = None
    content_type: Optional[str] = None
    version_id: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)
    is_dir: bool = False

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element, bucket_name: str) -> B:
        """Create new object with values from <Contents> XML element."""
        last_modified = findtext(element, "LastModified")
        size = findtext(element, "Size")
        return cls(
            bucket_name=bucket_name,
            object_name=cast(str, findtext(element, "Key", True)),
            last_modified=(
                from_iso8601utc(last_modified) if last_modified else None
            ),
            etag=_etag(findtext(element, "ETag")),
            size=int(size) if size else None,
            storage_class=findtext(element, "StorageClass"),
        )

    @classmethod
    def fromheaders(
            cls: Type[B],
            bucket_name: str,
            object_name: str,
            headers: Mapping[str, str],
    ) -> B:
        """Create new object with values from HEAD/GET response headers."""
        last_modified = headers.get("last-modified")
        return cls(
            bucket_name=bucket_name,
            object_name=object_name,
            last_modified=(
                from_http_header(last_modified) if last_modified else None
            ),
            etag=_etag(headers.get("etag")),
            size=int(headers.get("content-length", "0")),
            storage_class=headers.get("x-amz-storage-class"),
            content_type=headers.get("content-type"),
            version_id=headers.get("x-amz-version-id"),
            metadata={
                key.lower()[len(_META_PREFIX):]: value
                for key, value in headers.items()
                if key.lower().startswith(_META_PREFIX)
            },
        )


@dataclass(frozen=True)
class ListObjectsResult:
    """One page of ListObjects API result."""
    bucket_name: str
    objects: list[Object] = field(default_factory=list)
    prefixes: list[str] = field(default_factory=list)
    is_truncated: bool = False
    next_marker: Optional[str] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListObjectsResult:
        """Create new object with values from ListBucketResult element."""
        bucket_name = cast(str, findtext(element, "Name", True))
        objects = [
            Object.fromxml(tag, bucket_name)
            for tag in findall(element, "Contents")
        ]
        prefixes = [
            cast(str, findtext(tag, "Prefix", True))
            for tag in findall(element, "CommonPrefixes")
        ]
        is_truncated = _is_true(findtext(element, "IsTruncated"))
        next_marker = findtext(element, "NextMarker") or None
        if is_truncated and not next_marker:
            # NextMarker is only sent with a delimiter; continue after the
            # greatest key or prefix of this page.
            names = [obj.object_name for obj in objects] + prefixes
            next_marker = max(names) if names else None
        return cls(
            bucket_name=bucket_name,
            objects=objects,
            prefixes=prefixes,
            is_truncated=is_truncated,
            next_marker=next_marker if is_truncated else None,
        )


C = TypeVar("C", bound="Part")


@dataclass(frozen=True)
class Part:
    """Part information of a multipart upload."""
    part_number: int
    etag: str
    last_modified: Optional[datetime] = None
    size: Optional[int] = None

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        last_modified = findtext(element, "LastModified")
        size = findtext(element, "Size")
        return cls(
            part_number=int(cast(str, findtext(element, "PartNumber", True))),
            etag=cast(str, _etag(findtext(element, "ETag", True))),
            last_modified=(
                from_iso8601utc(last_modified) if last_modified else None
            ),
            size=int(size) if size else None,
        )


@dataclass(frozen=True)
class ListPartsResult:
    """One page of ListParts API result."""
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    upload_id: Optional[str] = None
    parts: list[Part] = field(default_factory=list)
    is_truncated: bool = False
    next_part_number_marker: Optional[int] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListPartsResult:
        """Create new object with values from ListPartsResult element."""
        marker = findtext(element, "NextPartNumberMarker")
        return cls(
            bucket_name=findtext(element, "Bucket"),
            object_name=findtext(element, "Key"),
            upload_id=findtext(element, "UploadId"),
            parts=[Part.fromxml(tag) for tag in findall(element, "Part")],
            is_truncated=_is_true(findtext(element, "IsTruncated")),
            next_part_number_marker=int(marker) if marker else None,
        )


@dataclass(frozen=True)
class Upload:
    """Incomplete multipart upload information."""
    object_name: str
    upload_id: str
    initiated_time: Optional[datetime] = None
    storage_class: Optional[str] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> Upload:
        """Create new object with values from <Upload> XML element."""
        initiated = findtext(element, "Initiated")
        return cls(
            object_name=cast(str, findtext(element, "Key", True)),
            upload_id=cast(str, findtext(element, "UploadId", True)),
            initiated_time=from_iso8601utc(initiated) if initiated else None,
            storage_class=findtext(element, "StorageClass"),
        )


@dataclass(frozen=True)
class ListMultipartUploadsResult:
    """One page of ListMultipartUploads API result."""
    bucket_name: Optional[str] = None
    uploads: list[Upload] = field(default_factory=list)
    is_truncated: bool = False
    next_key_marker: Optional[str] = None
    next_upload_id_marker: Optional[str] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListMultipartUploadsResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=findtext(element, "Bucket"),
            uploads=[
                Upload.fromxml(tag) for tag in findall(element, "Upload")
            ],
            is_truncated=_is_true(findtext(element, "IsTruncated")),
            next_key_marker=findtext(element, "NextKeyMarker") or None,
            next_upload_id_marker=(
                findtext(element, "NextUploadIdMarker") or None
            ),
        )


def parse_upload_id(element: ET.Element) -> str:
    """Parse upload ID from InitiateMultipartUploadResult element."""
    return cast(str, findtext(element, "UploadId", True))


@dataclass(frozen=True)
class CompleteMultipartUploadResult:
    """CompleteMultipartUpload API result."""
    bucket_name: Optional[str] = None
    object_name: Optional[str] = None
    location: Optional[str] = None
    etag: Optional[str] = None
    version_id: Optional[str] = None

    @classmethod
    def fromxml(
            cls,
            element: ET.Element,
            version_id: Optional[str] = None,
    ) -> CompleteMultipartUploadResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=findtext(element, "Bucket"),
            object_name=findtext(element, "Key"),
            location=findtext(element, "Location"),
            etag=_etag(findtext(element, "ETag")),
            version_id=version_id,
        )


@dataclass(frozen=True)
class ObjectWriteResult:
    """Result of any API creating an object or a part."""
    bucket_name: str
    object_name: str
    etag: Optional[str] = None
    version_id: Optional[str] = None


class ObjectReader:
    """
    Lazy byte stream of GetObject response.

    The body is read on demand; close the reader, or use it as a context
    manager, to release the connection. Closing before the end of data
    cancels the download.
    """

    def __init__(self, info: Object, response: RawResponse):
        self._info = info
        self._response = response

    @property
    def info(self) -> Object:
        """Get object information sent with the data."""
        return self._info

    @property
    def etag(self) -> Optional[str]:
        """Get ETag of the object."""
        return self._info.etag

    @property
    def size(self) -> Optional[int]:
        """Get number of bytes in this response, i.e. of the range."""
        return self._info.size

    @property
    def content_type(self) -> Optional[str]:
        """Get content type."""
        return self._info.content_type

    @property
    def last_modified(self) -> Optional[datetime]:
        """Get last modified time."""
        return self._info.last_modified

    def read(self, amt: Optional[int] = None) -> bytes:
        """Read up to amt bytes; all remaining bytes if amt is None."""
        if amt is None:
            return b"".join(self._response.stream())
        return self._response.read(amt)

    def stream(self, chunk_size: int = 64 * 1024) -> Iterator[bytes]:
        """Iterate object data in chunks."""
        return self._response.stream(chunk_size)

    def __iter__(self) -> Iterator[bytes]:
        return self.stream()

    def close(self):
        """Release the connection."""
        self._response.close()

    def __enter__(self) -> ObjectReader:
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.close()
