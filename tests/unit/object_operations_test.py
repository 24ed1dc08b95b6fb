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

import hashlib
import io
from datetime import datetime, timezone
from unittest import TestCase

from objectstorage.error import (AccessDenied, EntityTooLarge,
                                 InvalidArgument, NoSuchBucket, NoSuchKey,
                                 ServerError)

from .objectstorage_mocks import fake_client
from .request_test import NonSeekableStream


def md5(data):
    return hashlib.md5(data).hexdigest()


class PutObjectTest(TestCase):
    def setUp(self):
        self.client, self.server = fake_client(max_object_size=1024)
        self.client.create_bucket("bucket")

    def test_put_bytes(self):
        result = self.client.put_object("bucket", "object", b"hello")
        self.assertEqual(result.etag, md5(b"hello"))
        self.assertEqual(result.bucket_name, "bucket")
        self.assertEqual(result.object_name, "object")
        self.assertEqual(
            self.server.buckets["bucket"]["objects"]["object"]["data"],
            b"hello",
        )

    def test_put_stream(self):
        result = self.client.put_object(
            "bucket", "object", io.BytesIO(b"hello world"), 5,
        )
        self.assertEqual(result.etag, md5(b"hello"))
        self.assertEqual(
            self.server.buckets["bucket"]["objects"]["object"]["data"],
            b"hello",
        )

    def test_put_non_seekable_stream(self):
        self.client.put_object(
            "bucket", "object", NonSeekableStream(b"hello"), 5,
        )
        request = self.server.requests[-1]
        self.assertEqual(
            request.headers["x-amz-content-sha256"], "UNSIGNED-PAYLOAD",
        )

    def test_put_short_stream(self):
        sent = len(self.server.requests)
        self.assertRaises(
            InvalidArgument, self.client.put_object,
            "bucket", "object", io.BytesIO(b"abc"), 10,
        )
        self.assertEqual(len(self.server.requests), sent)
        self.assertRaises(
            InvalidArgument, self.client.put_object,
            "bucket", "object", NonSeekableStream(b"abc"), 10,
        )
        self.assertNotIn("object", self.server.buckets["bucket"]["objects"])

    def test_put_with_metadata(self):
        self.client.put_object(
            "bucket", "object", b"hello", content_type="text/plain",
            metadata={"color": "blue"},
        )
        info = self.client.stat_object("bucket", "object")
        self.assertEqual(info.content_type, "text/plain")
        self.assertEqual(info.metadata, {"color": "blue"})

    def test_too_large_is_rejected_locally(self):
        requests = len(self.server.requests)
        with self.assertRaises(EntityTooLarge) as context:
            self.client.put_object("bucket", "object", b"x" * 1025)
        self.assertEqual(context.exception.object_name, "object")
        self.assertRaises(
            EntityTooLarge, self.client.put_object, "bucket", "object",
            io.BytesIO(b""), 2048,
        )
        self.assertEqual(len(self.server.requests), requests)

    def test_invalid_arguments(self):
        requests = len(self.server.requests)
        cases = [
            ("bucket", "", b"data", None),
            ("bucket", "x" * 1025, b"data", None),
            ("Bucket", "object", b"data", None),
            ("bucket", "object", b"data", 3),
            ("bucket", "object", io.BytesIO(b"data"), None),
            ("bucket", "object", "text", None),
        ]
        for case in cases:
            self.assertRaises(
                InvalidArgument, self.client.put_object, *case,
            )
        self.assertEqual(len(self.server.requests), requests)

    def test_missing_bucket(self):
        self.assertRaises(
            NoSuchBucket, self.client.put_object, "missing", "object", b"x",
        )

    def test_server_error(self):
        self.server.fail_next(503, "SlowDown")
        with self.assertRaises(ServerError) as context:
            self.client.put_object("bucket", "object", b"hello")
        self.assertEqual(context.exception.code, "SlowDown")
        self.assertEqual(context.exception.status_code, 503)


class GetObjectTest(TestCase):
    def setUp(self):
        self.client, self.server = fake_client()
        self.client.create_bucket("bucket")
        self.client.put_object(
            "bucket", "object", b"hello, world", content_type="text/plain",
        )

    def test_get(self):
        with self.client.get_object("bucket", "object") as obj:
            self.assertEqual(obj.read(), b"hello, world")
            self.assertEqual(obj.etag, md5(b"hello, world"))
            self.assertEqual(obj.size, 12)
            self.assertEqual(obj.content_type, "text/plain")
            self.assertEqual(
                obj.last_modified,
                datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            )

    def test_range(self):
        with self.client.get_object("bucket", "object", 0, 4) as obj:
            self.assertEqual(obj.size, 5)
            self.assertEqual(obj.read(), b"hello")
        self.assertEqual(
            self.server.requests[-1].headers["Range"], "bytes=0-4",
        )

        with self.client.get_object("bucket", "object", 7) as obj:
            self.assertEqual(obj.read(), b"world")
        self.assertEqual(
            self.server.requests[-1].headers["Range"], "bytes=7-",
        )

        with self.client.get_object("bucket", "object", range_end=4) as obj:
            self.assertEqual(obj.read(), b"hello")

    def test_stream_in_chunks(self):
        with self.client.get_object("bucket", "object") as obj:
            self.assertEqual(obj.read(5), b"hello")
            self.assertEqual(
                list(obj.stream(3)), [b", w", b"orl", b"d"],
            )
            self.assertEqual(obj.read(5), b"")

    def test_iterate(self):
        obj = self.client.get_object("bucket", "object")
        try:
            self.assertEqual(b"".join(obj), b"hello, world")
        finally:
            obj.close()

    def test_invalid_range(self):
        for args in [(-1, 4), (5, 4)]:
            self.assertRaises(
                InvalidArgument, self.client.get_object, "bucket", "object",
                *args,
            )

    def test_range_not_satisfiable(self):
        with self.assertRaises(ServerError) as context:
            self.client.get_object("bucket", "object", 100)
        self.assertEqual(context.exception.code, "InvalidRange")
        self.assertEqual(context.exception.status_code, 416)

    def test_missing(self):
        with self.assertRaises(NoSuchKey) as context:
            self.client.get_object("bucket", "missing")
        self.assertEqual(context.exception.object_name, "missing")
        self.assertRaises(
            NoSuchBucket, self.client.get_object, "missing", "object",
        )

    def test_unicode_name(self):
        self.client.put_object("bucket", "dir/汉字 file", b"data")
        with self.client.get_object("bucket", "dir/汉字 file") as obj:
            self.assertEqual(obj.read(), b"data")
        self.assertEqual(
            self.server.requests[-1].url.path,
            "/bucket/dir/%E6%B1%89%E5%AD%97%20file",
        )


class StatObjectTest(TestCase):
    def test_stat(self):
        client, _ = fake_client()
        client.create_bucket("bucket")
        client.put_object("bucket", "object", b"hello")
        info = client.stat_object("bucket", "object")
        self.assertEqual(info.bucket_name, "bucket")
        self.assertEqual(info.object_name, "object")
        self.assertEqual(info.size, 5)
        self.assertEqual(info.etag, md5(b"hello"))
        self.assertEqual(info.content_type, "application/octet-stream")

    def test_stat_missing(self):
        client, _ = fake_client()
        client.create_bucket("bucket")
        with self.assertRaises(NoSuchKey) as context:
            client.stat_object("bucket", "missing")
        self.assertEqual(context.exception.status_code, 404)


class DeleteObjectTest(TestCase):
    def setUp(self):
        self.client, self.server = fake_client()
        self.client.create_bucket("bucket")

    def test_delete(self):
        self.client.put_object("bucket", "object", b"hello")
        self.client.delete_object("bucket", "object")
        self.assertRaises(
            NoSuchKey, self.client.stat_object, "bucket", "object",
        )

    def test_delete_missing_is_success(self):
        self.client.delete_object("bucket", "missing")
        self.server.fail_next(404, "NoSuchKey")
        self.client.delete_object("bucket", "missing")

    def test_delete_other_errors(self):
        self.assertRaises(
            NoSuchBucket, self.client.delete_object, "missing", "object",
        )
        self.server.fail_next(403, "AccessDenied")
        self.assertRaises(
            AccessDenied, self.client.delete_object, "bucket", "object",
        )
