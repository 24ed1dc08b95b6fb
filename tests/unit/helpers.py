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

from collections import namedtuple
from unittest import TestCase
from urllib.parse import urlunsplit

from objectstorage.error import InvalidArgument
from objectstorage.helpers import (Endpoint, check_bucket_name,
                                   check_object_name, check_part_number,
                                   headers_to_strings, metadata_to_headers)


def generate_error(code, message, request_id, host_id,
                   resource, bucket_name, object_name):
    return '''
    <Error>
      <Code>{0}</Code>
      <Message>{1}</Message>
      <RequestId>{2}</RequestId>
      <HostId>{3}</HostId>
      <Resource>{4}</Resource>
      <BucketName>{5}</BucketName>
      <Key>{6}</Key>
    </Error>
    '''.format(code, message, request_id, host_id,
               resource, bucket_name, object_name)


class EndpointTests(TestCase):
    def test_parse_error(self):
        cases = [
            "",
            "http://localhost:9000",
            "localhost:9000/path",
            "localhost:9000?query=1",
            "user:pass@localhost:9000",
            "localhost:65536",
            "localhost:port",
        ]
        for endpoint in cases:
            self.assertRaises(InvalidArgument, Endpoint.parse, endpoint)

    def test_parse(self):
        Case = namedtuple("Case", ["args", "host", "region"])
        cases = [
            Case(("localhost:9000", False), "localhost:9000", "us-east-1"),
            Case(("localhost:80", False), "localhost", "us-east-1"),
            Case(("localhost:443", True), "localhost", "us-east-1"),
            Case(("localhost:443", False), "localhost:443", "us-east-1"),
            Case(("s3.amazonaws.com", True, "eu-west-1"),
                 "s3.amazonaws.com", "eu-west-1"),
        ]
        for case in cases:
            endpoint = Endpoint.parse(*case.args)
            self.assertEqual(endpoint.host, case.host)
            self.assertEqual(endpoint.region, case.region)

    def test_invalid_region(self):
        self.assertRaises(
            InvalidArgument, Endpoint.parse, "localhost", True, "us_east!",
        )

    def test_build_url(self):
        Case = namedtuple("Case", ["endpoint", "args", "url"])
        path_style = Endpoint.parse("localhost:9000", secure=False)
        virtual = Endpoint.parse("s3.amazonaws.com", virtual_style=True)
        cases = [
            Case(path_style, ("GET",), "http://localhost:9000/"),
            Case(path_style, ("GET", "bucket"),
                 "http://localhost:9000/bucket"),
            Case(path_style, ("GET", "bucket", "dir/a b~c"),
                 "http://localhost:9000/bucket/dir/a%20b~c"),
            Case(path_style, ("GET", "bucket", None, {"b": "2", "a": "1"}),
                 "http://localhost:9000/bucket?a=1&b=2"),
            Case(path_style,
                 ("GET", "bucket", None, {"prefix": "a/b", "delimiter": ""}),
                 "http://localhost:9000/bucket?delimiter=&prefix=a%2Fb"),
            Case(virtual, ("GET", "bucket", "key"),
                 "https://bucket.s3.amazonaws.com/key"),
            Case(virtual, ("GET", "bucket"),
                 "https://bucket.s3.amazonaws.com/"),
            # create bucket
            Case(virtual, ("PUT", "bucket"),
                 "https://s3.amazonaws.com/bucket"),
            # dotted bucket over TLS
            Case(virtual, ("GET", "my.bucket", "key"),
                 "https://s3.amazonaws.com/my.bucket/key"),
        ]
        for case in cases:
            self.assertEqual(
                urlunsplit(case.endpoint.build_url(*case.args)), case.url,
            )


class BucketNameTests(TestCase):
    def test_bucket_name(self):
        for name in ["abc", "my-bucket", "my.bucket.1", "a" * 63, "1bucket"]:
            check_bucket_name(name)

    def test_bucket_name_invalid(self):
        cases = [
            "ab",
            "a" * 64,
            "Bucket",
            "bucket_name",
            "-bucket",
            "bucket-",
            ".bucket",
            "bucket..name",
            "bucket.-name",
            "bucket-.name",
            "192.168.1.1",
            "",
            None,
        ]
        for name in cases:
            self.assertRaises(InvalidArgument, check_bucket_name, name)


class ObjectNameTests(TestCase):
    def test_object_name(self):
        for name in ["a", "dir/file.txt", "汉字", "x" * 1024]:
            check_object_name(name)

    def test_object_name_invalid(self):
        for name in ["", "   ", "x" * 1025, "汉" * 342, None, b"key"]:
            self.assertRaises(InvalidArgument, check_object_name, name)


class PartNumberTests(TestCase):
    def test_part_number(self):
        for number in [1, 5000, 10000]:
            check_part_number(number)
        for number in [0, -1, 10001, True, "1", 1.0]:
            self.assertRaises(InvalidArgument, check_part_number, number)


class HeadersTests(TestCase):
    def test_headers_to_strings_redacts(self):
        text = headers_to_strings({
            "authorization": (
                "AWS4-HMAC-SHA256 Credential=minio/20150620/us-east-1/s3/"
                "aws4_request, SignedHeaders=host, Signature=0123abcd"
            ),
            "host": "localhost",
        }, titled_key=True)
        self.assertNotIn("minio/", text)
        self.assertNotIn("0123abcd", text)
        self.assertIn("Credential=*REDACTED*", text)
        self.assertIn("Signature=*REDACTED*", text)
        self.assertIn("Host: localhost", text)

    def test_metadata_to_headers(self):
        self.assertEqual(
            metadata_to_headers({"color": "red", "X-Amz-Meta-Size": 1}),
            {"X-Amz-Meta-color": "red", "X-Amz-Meta-Size": "1"},
        )
        self.assertEqual(metadata_to_headers(None), {})
        self.assertRaises(
            InvalidArgument, metadata_to_headers, {"name": "汉字"},
        )
