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

# pylint: disable=too-many-arguments
# pylint: disable=too-many-positional-arguments
# pylint: disable=too-many-public-methods
# pylint: disable=too-many-instance-attributes

"""
Low level client to perform bucket, object and multipart upload operations
on Amazon S3 compatible object storage.
"""

from __future__ import absolute_import, annotations

from datetime import datetime
from typing import BinaryIO, Callable, Iterator, Optional, TextIO, Union

import urllib3
from urllib3._collections import HTTPHeaderDict

from . import time
from .credentials import Credentials
from .datatypes import (Bucket, CompleteMultipartUploadResult,
                        ListMultipartUploadsResult, ListObjectsResult,
                        ListPartsResult, Object, ObjectReader,
                        ObjectWriteResult, Part, parse_list_buckets,
                        parse_upload_id)
from .error import (EntityTooLarge, InvalidArgument, NoSuchBucket, NoSuchKey,
                    NoSuchUpload)
from .helpers import (_DEFAULT_USER_AGENT, DEFAULT_REGION, MAX_OBJECT_SIZE,
                      MAX_PART_SIZE, Endpoint, check_bucket_name,
                      check_object_name, check_part_number,
                      headers_to_strings, metadata_to_headers)
from .multipart import MultipartUpload, UploadState
from .request import RequestBuilder
from .transport import (DEFAULT_BACKOFF_FACTOR, DEFAULT_MAX_RETRIES,
                        DEFAULT_TIMEOUT, HTTPTransport, RawResponse,
                        Transport)
from .translator import ResponseTranslator
from .xml import Element, SubElement, getbytes

Data = Union[bytes, BinaryIO]


class ObjectStorage:
    """
    Low level client of Amazon S3 compatible object storage.

    Each operation builds a signed request, sends it through the transport
    and translates the response into a typed result or raises a subclass of
    :class:`objectstorage.error.ObjectStorageError`.
    """
    _endpoint: Endpoint
    _builder: RequestBuilder
    _transport: Transport
    _translator: ResponseTranslator
    _trace_stream: Optional[TextIO]

    def __init__(
            self,
            endpoint: str,
            access_key: Optional[str] = None,
            secret_key: Optional[str] = None,
            session_token: Optional[str] = None,
            secure: bool = True,
            region: Optional[str] = None,
            virtual_style: bool = False,
            http_client: Optional[urllib3.PoolManager] = None,
            transport: Optional[Transport] = None,
            credentials: Optional[Credentials] = None,
            cert_check: bool = True,
            timeout: float = DEFAULT_TIMEOUT,
            max_retries: int = DEFAULT_MAX_RETRIES,
            backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
            max_object_size: int = MAX_OBJECT_SIZE,
            max_part_size: int = MAX_PART_SIZE,
            clock: Callable[[], datetime] = time.utcnow,
    ):
        """
        Initializes a new client object.

        Args:
            endpoint (str):
                Hostname of an S3 service with optional port.

            access_key (Optional[str], default=None):
                Access key (aka user ID) of your account in the S3 service.

            secret_key (Optional[str], default=None):
                Secret key (aka password) of your account in the S3 service.

            session_token (Optional[str], default=None):
                Session token of your account in the S3 service.

            secure (bool, default=True):
                Flag to indicate whether to use a secure (TLS) connection.

            region (Optional[str], default=None):
                Region used for signing; 'us-east-1' if not given.

            virtual_style (bool, default=False):
                Address buckets as 'bucket.host' instead of 'host/bucket'.

            http_client (Optional[urllib3.PoolManager], default=None):
                Customized HTTP client for the default transport.

            transport (Optional[Transport], default=None):
                Object with a ``send(request)`` method used instead of the
                default urllib3 transport.

            credentials (Optional[Credentials], default=None):
                Credentials; alternative to access/secret key arguments.
                Requests are sent anonymously without credentials.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation.

            timeout (float, default=300):
                Connect and read timeout in seconds of each request.

            max_retries (int, default=3):
                Retries of idempotent requests on connection failures.

            backoff_factor (float, default=0.2):
                Exponential backoff factor between retries.

            max_object_size (int, default=5GiB):
                Largest object accepted by :meth:`put_object`.

            max_part_size (int, default=5GiB):
                Largest part accepted by :meth:`upload_part`.

            clock (Callable[[], datetime], default=time.utcnow):
                Source of request timestamps used in signatures.

        Notes:
            The client is thread-safe; it keeps no per-request state and
            the connection pool of the default transport is synchronized.

        Example:
            >>> from objectstorage import ObjectStorage
            >>>
            >>> client = ObjectStorage(
            ...     "s3.amazonaws.com",
            ...     access_key="ACCESS-KEY",
            ...     secret_key="SECRET-KEY",
            ...     region="us-west-2",
            ... )
        """
        if access_key:
            if secret_key is None:
                raise InvalidArgument(
                    "secret key must be provided with access key",
                )
            credentials = Credentials(access_key, secret_key, session_token)

        if transport is not None and http_client is not None:
            raise InvalidArgument(
                "http_client and transport must not be given together",
            )

        self._endpoint = Endpoint.parse(
            endpoint, secure=secure, region=region,
            virtual_style=virtual_style,
        )
        self._builder = RequestBuilder(
            self._endpoint, credentials, _DEFAULT_USER_AGENT, clock,
        )
        self._transport = transport or HTTPTransport(
            http_client=http_client,
            cert_check=cert_check,
            timeout=timeout,
            max_retries=max_retries,
            backoff_factor=backoff_factor,
        )
        self._translator = ResponseTranslator()
        self._max_object_size = max_object_size
        self._max_part_size = max_part_size
        self._trace_stream = None

    @property
    def endpoint(self) -> Endpoint:
        """Get endpoint."""
        return self._endpoint

    def set_app_info(self, app_name: str, app_version: str):
        """
        Set your application name and version to user agent header.

        Args:
            app_name (str):
                Application name.

            app_version (str):
                Application version.

        Example:
            >>> client.set_app_info("my_app", "1.0.2")
        """
        if not (app_name and app_version):
            raise InvalidArgument("Application name/version cannot be empty.")
        self._builder = self._builder.with_user_agent(
            f"{_DEFAULT_USER_AGENT} {app_name}/{app_version}",
        )

    def trace_on(self, stream: TextIO):
        """
        Enable http trace.

        Args:
            stream (TextIO):
                Stream for writing HTTP call tracing.
        """
        if not stream:
            raise InvalidArgument("Input stream for trace output is invalid.")
        self._trace_stream = stream

    def trace_off(self):
        """Disable HTTP trace."""
        self._trace_stream = None

    def close(self):
        """Release pooled connections of the transport."""
        close = getattr(self._transport, "close", None)
        if close:
            close()

    def _execute(
            self,
            method: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            query_params: Optional[dict[str, str]] = None,
            headers: Optional[HTTPHeaderDict] = None,
            body: Optional[Data] = None,
            length: Optional[int] = None,
    ) -> RawResponse:
        """Build, sign and send request; return raw response."""
        request = self._builder.build(
            method,
            bucket_name=bucket_name,
            object_name=object_name,
            query_params=query_params,
            headers=headers,
            body=body,
            length=length,
        )

        trace = self._trace_stream
        if trace:
            trace.write("---------START-HTTP---------\n")
            query = ("?" + request.url.query) if request.url.query else ""
            trace.write(f"{method} {request.url.path}{query} HTTP/1.1\n")
            trace.write(headers_to_strings(request.headers, titled_key=True))
            trace.write("\n\n")

        response = self._transport.send(request)

        if trace:
            trace.write(f"HTTP/1.1 {response.status}\n")
            trace.write(headers_to_strings(response.headers))
            trace.write("\n----------END-HTTP----------\n")

        return response

    def _call(
            self,
            method: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            decoder: Optional[Callable] = None,
            **kwargs,
    ):
        """Execute request and translate its response."""
        response = self._execute(method, bucket_name, object_name, **kwargs)
        return self._translator.translate(
            response, decoder, bucket_name, object_name,
        )

    # Bucket operations

    def create_bucket(
            self,
            bucket_name: str,
            location: Optional[str] = None,
    ):
        """
        Create a bucket.

        Args:
            bucket_name (str):
                Name of the bucket.

            location (Optional[str], default=None):
                Region in which the bucket will be created; the client's
                region if not given.

        Raises:
            BucketAlreadyExists: the name is taken, by you or anyone else.
            InvalidArgument: the name is invalid; no request is sent.

        Example:
            >>> try:
            ...     client.create_bucket("my-bucket")
            ... except BucketAlreadyExists:
            ...     pass
        """
        check_bucket_name(bucket_name)
        location = location or self._endpoint.region
        body = None
        if location != DEFAULT_REGION:
            element = Element("CreateBucketConfiguration")
            SubElement(element, "LocationConstraint", location)
            body = getbytes(element)
        self._call("PUT", bucket_name, body=body)

    def list_buckets(self) -> list[Bucket]:
        """
        List information of all accessible buckets.

        Returns:
            list[Bucket]: Buckets ordered by name.

        Example:
            >>> for bucket in client.list_buckets():
            ...     print(bucket.name, bucket.creation_date)
        """
        return self._call("GET", decoder=parse_list_buckets)

    def bucket_exists(self, bucket_name: str) -> bool:
        """Check if a bucket exists."""
        check_bucket_name(bucket_name)
        try:
            self._call("HEAD", bucket_name)
        except NoSuchBucket:
            return False
        return True

    def delete_bucket(self, bucket_name: str):
        """
        Delete an empty bucket.

        Raises:
            NoSuchBucket: the bucket does not exist.
            BucketNotEmpty: the bucket still contains objects.
        """
        check_bucket_name(bucket_name)
        self._call("DELETE", bucket_name)

    def list_objects(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            marker: Optional[str] = None,
            max_keys: Optional[int] = None,
            delimiter: Optional[str] = None,
    ) -> ListObjectsResult:
        """
        List one page of objects of a bucket.

        Args:
            bucket_name (str):
                Name of the bucket.

            prefix (Optional[str], default=None):
                Return objects whose names start with this prefix.

            marker (Optional[str], default=None):
                Return objects after this key; pass ``next_marker`` of the
                previous page to continue.

            max_keys (Optional[int], default=None):
                Maximum objects in the page, 1 to 1000.

            delimiter (Optional[str], default=None):
                Group keys sharing a prefix up to the delimiter into
                ``prefixes``.

        Returns:
            ListObjectsResult:
                Objects, common prefixes, truncation flag and the marker of
                the next page.

        Example:
            >>> page = client.list_objects("my-bucket", prefix="logs/")
            >>> while True:
            ...     for obj in page.objects:
            ...         print(obj.object_name, obj.size)
            ...     if not page.is_truncated:
            ...         break
            ...     page = client.list_objects(
            ...         "my-bucket", prefix="logs/", marker=page.next_marker,
            ...     )
        """
        check_bucket_name(bucket_name)
        if max_keys is not None and not 1 <= max_keys <= 1000:
            raise InvalidArgument(
                f"max_keys {max_keys} must be between 1 and 1000",
                bucket_name=bucket_name,
            )

        # Empty delimiter/prefix and max-keys are always sent; bucket
        # policies conditioned on them reject requests without them.
        query_params = {
            "delimiter": delimiter or "",
            "max-keys": str(max_keys or 1000),
            "prefix": prefix or "",
        }
        if marker:
            query_params["marker"] = marker
        return self._call(
            "GET", bucket_name,
            decoder=ListObjectsResult.fromxml,
            query_params=query_params,
        )

    def iter_objects(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            marker: Optional[str] = None,
            delimiter: Optional[str] = None,
            max_keys: Optional[int] = None,
    ) -> Iterator[Object]:
        """
        Lazily iterate objects of a bucket page by page.

        Nothing is cached; iteration can be restarted from any marker.
        Common prefixes are yielded as objects with ``is_dir`` set, after
        the objects of the same page. ``max_keys`` is the page size.
        """
        check_bucket_name(bucket_name)
        if max_keys is not None and not 1 <= max_keys <= 1000:
            raise InvalidArgument(
                f"max_keys {max_keys} must be between 1 and 1000",
                bucket_name=bucket_name,
            )
        return self._iter_objects(
            bucket_name, prefix, marker, delimiter, max_keys,
        )

    def _iter_objects(
            self,
            bucket_name: str,
            prefix: Optional[str],
            marker: Optional[str],
            delimiter: Optional[str],
            max_keys: Optional[int],
    ) -> Iterator[Object]:
        """Drive list_objects from marker to the last page."""
        while True:
            page = self.list_objects(
                bucket_name, prefix=prefix, marker=marker,
                max_keys=max_keys, delimiter=delimiter,
            )
            yield from page.objects
            for name in page.prefixes:
                yield Object(bucket_name, name, is_dir=True)
            if not page.is_truncated or not page.next_marker:
                return
            marker = page.next_marker

    # Object operations

    def put_object(
            self,
            bucket_name: str,
            object_name: str,
            data: Data,
            length: Optional[int] = None,
            content_type: str = "application/octet-stream",
            metadata: Optional[dict[str, str]] = None,
    ) -> ObjectWriteResult:
        """
        Upload data to an object in a single request.

        Args:
            bucket_name (str):
                Name of the bucket.

            object_name (str):
                Object name in the bucket.

            data (Union[bytes, BinaryIO]):
                Object data; streams are read in chunks, never buffered
                whole.

            length (Optional[int], default=None):
                Number of bytes to upload; required for streams.

            content_type (str, default="application/octet-stream"):
                Content type of the object.

            metadata (Optional[dict[str, str]], default=None):
                User metadata sent as 'X-Amz-Meta-' headers.

        Returns:
            ObjectWriteResult: ETag and version ID of the new object.

        Raises:
            EntityTooLarge: length is above the single upload limit; use
                multipart upload instead. No request is sent.

        Example:
            >>> result = client.put_object(
            ...     "my-bucket", "my-object", io.BytesIO(b"hello"), 5,
            ... )
            >>> print(result.etag)
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        length = self._check_length(data, length, bucket_name, object_name)
        if length > self._max_object_size:
            raise EntityTooLarge(
                f"object size {length} exceeds single upload limit "
                f"{self._max_object_size}",
                bucket_name=bucket_name,
                object_name=object_name,
            )

        headers = HTTPHeaderDict(metadata_to_headers(metadata))
        headers["Content-Type"] = content_type or "application/octet-stream"
        response = self._execute(
            "PUT", bucket_name, object_name,
            headers=headers, body=data, length=length,
        )
        self._translator.check(response, bucket_name, object_name)
        response.drain()
        return ObjectWriteResult(
            bucket_name,
            object_name,
            etag=(response.headers.get("etag") or "").replace('"', "") or None,
            version_id=response.headers.get("x-amz-version-id"),
        )

    def get_object(
            self,
            bucket_name: str,
            object_name: str,
            range_start: Optional[int] = None,
            range_end: Optional[int] = None,
    ) -> ObjectReader:
        """
        Get data of an object as a lazy stream.

        ``range_start`` and ``range_end`` select an inclusive byte range;
        either may be omitted. Returned reader must be closed after use.

        Example:
            >>> with client.get_object("my-bucket", "my-object", 0, 4) as obj:
            ...     first_five_bytes = obj.read()
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)

        headers = HTTPHeaderDict()
        if range_start is not None or range_end is not None:
            start = range_start or 0
            if start < 0 or (range_end is not None and range_end < start):
                raise InvalidArgument(
                    f"invalid range {range_start}-{range_end}",
                    bucket_name=bucket_name,
                    object_name=object_name,
                )
            end = "" if range_end is None else str(range_end)
            headers["Range"] = f"bytes={start}-{end}"

        response = self._execute(
            "GET", bucket_name, object_name, headers=headers,
        )
        self._translator.check(response, bucket_name, object_name)
        return ObjectReader(
            Object.fromheaders(bucket_name, object_name, response.headers),
            response,
        )

    def stat_object(self, bucket_name: str, object_name: str) -> Object:
        """
        Get object information and metadata of an object.

        Raises:
            NoSuchKey: the object does not exist.
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        response = self._execute("HEAD", bucket_name, object_name)
        self._translator.check(response, bucket_name, object_name)
        response.drain()
        return Object.fromheaders(bucket_name, object_name, response.headers)

    def delete_object(self, bucket_name: str, object_name: str):
        """
        Delete an object. Deleting a missing object succeeds.
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        try:
            self._call("DELETE", bucket_name, object_name)
        except NoSuchKey:
            pass

    # Multipart upload operations

    def initiate_multipart_upload(
            self,
            bucket_name: str,
            object_name: str,
            content_type: Optional[str] = None,
            metadata: Optional[dict[str, str]] = None,
    ) -> MultipartUpload:
        """
        Start a multipart upload.

        Returns:
            MultipartUpload: session handle in ``INITIATED`` state.

        Example:
            >>> upload = client.initiate_multipart_upload(
            ...     "my-bucket", "big.bin",
            ... )
            >>> part1 = client.upload_part(upload, 1, data1)
            >>> part2 = client.upload_part(upload, 2, data2)
            >>> client.complete_multipart_upload(upload)
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        headers = HTTPHeaderDict(metadata_to_headers(metadata))
        headers["Content-Type"] = content_type or "application/octet-stream"
        upload_id = self._call(
            "POST", bucket_name, object_name,
            decoder=parse_upload_id,
            query_params={"uploads": ""},
            headers=headers,
        )
        return MultipartUpload(bucket_name, object_name, upload_id)

    def upload_part(
            self,
            upload: MultipartUpload,
            part_number: int,
            data: Data,
            length: Optional[int] = None,
    ) -> Part:
        """
        Upload one part of a multipart upload.

        Parts of one upload may be uploaded concurrently. A failed part
        leaves the upload untouched; retry the part or abort the upload.

        Args:
            upload (MultipartUpload):
                Session returned by :meth:`initiate_multipart_upload`.

            part_number (int):
                Part number between 1 and 10000.

            data (Union[bytes, BinaryIO]):
                Part data.

            length (Optional[int], default=None):
                Number of bytes to upload; required for streams.

        Returns:
            Part: part number, ETag and size recorded in the session.

        Raises:
            InvalidState: the upload is completed or aborted.
            InvalidArgument: the part number is out of range.
            EntityTooLarge: the part is above the part size limit.
        """
        check_part_number(part_number)
        upload.check_state(
            "upload_part",
            UploadState.INITIATED, UploadState.PARTS_UPLOADING,
        )
        length = self._check_length(
            data, length, upload.bucket_name, upload.object_name,
        )
        if length > self._max_part_size:
            raise EntityTooLarge(
                f"part size {length} exceeds limit {self._max_part_size}",
                bucket_name=upload.bucket_name,
                object_name=upload.object_name,
            )

        response = self._execute(
            "PUT", upload.bucket_name, upload.object_name,
            query_params={
                "partNumber": str(part_number),
                "uploadId": upload.upload_id,
            },
            body=data,
            length=length,
        )
        self._translator.check(
            response, upload.bucket_name, upload.object_name,
        )
        response.drain()
        part = Part(
            part_number=part_number,
            etag=(response.headers.get("etag") or "").replace('"', ""),
            size=length,
        )
        upload.record_part(part)
        return part

    def list_parts(
            self,
            upload: MultipartUpload,
            max_parts: Optional[int] = None,
    ) -> Iterator[Part]:
        """
        Lazily iterate parts the server has recorded for an upload.

        Args:
            upload (MultipartUpload):
                Session in ``INITIATED`` or ``PARTS_UPLOADING`` state.

            max_parts (Optional[int], default=None):
                Parts fetched per request, 1 to 1000.
        """
        upload.check_state(
            "list_parts",
            UploadState.INITIATED, UploadState.PARTS_UPLOADING,
        )
        if max_parts is not None and not 1 <= max_parts <= 1000:
            raise InvalidArgument(
                f"max_parts {max_parts} must be between 1 and 1000",
            )
        return self._iter_parts(upload, max_parts or 1000)

    def _iter_parts(
            self,
            upload: MultipartUpload,
            max_parts: int,
    ) -> Iterator[Part]:
        """Execute ListParts S3 API page by page."""
        marker = None
        while True:
            query_params = {
                "uploadId": upload.upload_id,
                "max-parts": str(max_parts),
            }
            if marker:
                query_params["part-number-marker"] = str(marker)
            result = self._call(
                "GET", upload.bucket_name, upload.object_name,
                decoder=ListPartsResult.fromxml,
                query_params=query_params,
            )
            yield from result.parts
            if not result.is_truncated or not result.next_part_number_marker:
                return
            marker = result.next_part_number_marker

    def complete_multipart_upload(
            self,
            upload: MultipartUpload,
            parts: Optional[list[Part]] = None,
    ) -> CompleteMultipartUploadResult:
        """
        Complete a multipart upload by assembling its parts.

        Call this only after every intended part upload has succeeded.

        Args:
            upload (MultipartUpload):
                Session in ``PARTS_UPLOADING`` state.

            parts (Optional[list[Part]], default=None):
                Parts in ascending part number order; the parts recorded
                in the session if not given.

        Returns:
            CompleteMultipartUploadResult: ETag and location of the object.

        Raises:
            InvalidState: no part uploaded yet, the upload is completed
                or aborted, or another complete or abort is in progress.
            InvalidArgument: the part list is empty, unordered, or an ETag
                does not match the uploaded part.
        """
        upload.begin("complete", UploadState.PARTS_UPLOADING)
        state = None
        try:
            parts = upload.manifest(parts)

            element = Element("CompleteMultipartUpload")
            for part in parts:
                tag = SubElement(element, "Part")
                SubElement(tag, "PartNumber", str(part.part_number))
                SubElement(tag, "ETag", '"' + part.etag + '"')
            headers = HTTPHeaderDict({"Content-Type": "application/xml"})

            response = self._execute(
                "POST", upload.bucket_name, upload.object_name,
                query_params={"uploadId": upload.upload_id},
                headers=headers,
                body=getbytes(element),
            )
            result = self._translator.translate(
                response,
                lambda elem: CompleteMultipartUploadResult.fromxml(
                    elem, response.headers.get("x-amz-version-id"),
                ),
                upload.bucket_name,
                upload.object_name,
            )
            state = UploadState.COMPLETED
        finally:
            upload.finish(state)
        return result

    def abort_multipart_upload(self, upload: MultipartUpload):
        """
        Abort a multipart upload and release its parts on the server.

        Aborting an aborted upload is a no-op.

        Raises:
            InvalidState: the upload is completed, or another complete or
                abort is in progress.
        """
        if upload.state == UploadState.ABORTED:
            return
        upload.begin(
            "abort", UploadState.INITIATED, UploadState.PARTS_UPLOADING,
        )
        state = None
        try:
            try:
                self._call(
                    "DELETE", upload.bucket_name, upload.object_name,
                    query_params={"uploadId": upload.upload_id},
                )
            except NoSuchUpload:
                pass
            state = UploadState.ABORTED
        finally:
            upload.finish(state)

    def list_multipart_uploads(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            key_marker: Optional[str] = None,
            upload_id_marker: Optional[str] = None,
            max_uploads: Optional[int] = None,
    ) -> ListMultipartUploadsResult:
        """List one page of incomplete multipart uploads of a bucket."""
        check_bucket_name(bucket_name)
        if max_uploads is not None and not 1 <= max_uploads <= 1000:
            raise InvalidArgument(
                f"max_uploads {max_uploads} must be between 1 and 1000",
                bucket_name=bucket_name,
            )
        query_params = {
            "uploads": "",
            "max-uploads": str(max_uploads or 1000),
            "prefix": prefix or "",
        }
        if key_marker:
            query_params["key-marker"] = key_marker
        if upload_id_marker:
            query_params["upload-id-marker"] = upload_id_marker
        return self._call(
            "GET", bucket_name,
            decoder=ListMultipartUploadsResult.fromxml,
            query_params=query_params,
        )

    @staticmethod
    def _check_length(
            data: Data,
            length: Optional[int],
            bucket_name: str,
            object_name: str,
    ) -> int:
        """Return length of data; validate it against bytes data."""
        if isinstance(data, bytes):
            if length is not None and length != len(data):
                raise InvalidArgument(
                    f"length {length} does not match data of {len(data)} "
                    "bytes",
                    bucket_name=bucket_name,
                    object_name=object_name,
                )
            return len(data)
        if not hasattr(data, "read"):
            raise InvalidArgument(
                "data must be bytes or a binary stream",
                bucket_name=bucket_name,
                object_name=object_name,
            )
        if length is None or length < 0:
            raise InvalidArgument(
                "length must be provided for stream data",
                bucket_name=bucket_name,
                object_name=object_name,
            )
        return length
