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

from datetime import datetime, timezone
from unittest import TestCase

from objectstorage.datatypes import (CompleteMultipartUploadResult,
                                     ListMultipartUploadsResult,
                                     ListObjectsResult, ListPartsResult,
                                     parse_upload_id)
from objectstorage.xml import fromstring


class ListObjectsResultTest(TestCase):
    def test_list_objects(self):
        result = ListObjectsResult.fromxml(fromstring('''
<ListBucketResult xmlns="http://s3.amazonaws.com/doc/2006-03-01/">
  <Name>bucket</Name>
  <Prefix></Prefix>
  <MaxKeys>1000</MaxKeys>
  <IsTruncated>false</IsTruncated>
  <Contents>
    <Key>6/f/9/6f9898076bb08572403f95dbb86c5b9c85e1e1b3</Key>
    <LastModified>2016-11-27T07:55:53.000Z</LastModified>
    <ETag>&quot;5d5512301b6b6e247b8aec334b2cf7ea&quot;</ETag>
    <Size>493</Size>
    <StorageClass>REDUCED_REDUNDANCY</StorageClass>
  </Contents>
  <Contents>
    <Key>b/d/7/bd7f6410cced55228902d881c2954ebc826d7464</Key>
    <LastModified>2016-11-27T07:10:27.000Z</LastModified>
    <ETag>&quot;f00483d523ffc8b7f2883ae896769d85&quot;</ETag>
    <Size>493</Size>
    <StorageClass>REDUCED_REDUNDANCY</StorageClass>
  </Contents>
</ListBucketResult>'''))
        self.assertEqual(result.bucket_name, 'bucket')
        self.assertEqual(len(result.objects), 2)
        obj = result.objects[0]
        self.assertEqual(
            obj.object_name, '6/f/9/6f9898076bb08572403f95dbb86c5b9c85e1e1b3',
        )
        self.assertEqual(obj.etag, '5d5512301b6b6e247b8aec334b2cf7ea')
        self.assertEqual(obj.size, 493)
        self.assertEqual(obj.storage_class, 'REDUCED_REDUNDANCY')
        self.assertEqual(
            obj.last_modified,
            datetime(2016, 11, 27, 7, 55, 53, tzinfo=timezone.utc),
        )
        self.assertFalse(result.is_truncated)
        self.assertIsNone(result.next_marker)

    def test_truncated_without_next_marker(self):
        result = ListObjectsResult.fromxml(fromstring(
            '<ListBucketResult><Name>bucket</Name>'
            '<IsTruncated>true</IsTruncated>'
            '<Contents><Key>a</Key></Contents>'
            '<Contents><Key>c</Key></Contents>'
            '<CommonPrefixes><Prefix>b/</Prefix></CommonPrefixes>'
            '</ListBucketResult>'
        ))
        self.assertTrue(result.is_truncated)
        self.assertEqual(result.next_marker, 'c')
        self.assertEqual(result.prefixes, ['b/'])
        self.assertIsNone(result.objects[0].size)

    def test_next_marker(self):
        result = ListObjectsResult.fromxml(fromstring(
            '<ListBucketResult><Name>bucket</Name>'
            '<IsTruncated>true</IsTruncated><NextMarker>x/</NextMarker>'
            '<Contents><Key>a</Key></Contents>'
            '</ListBucketResult>'
        ))
        self.assertEqual(result.next_marker, 'x/')


class MultipartResultTest(TestCase):
    def test_list_parts(self):
        result = ListPartsResult.fromxml(fromstring(
            '<ListPartsResult><Bucket>bucket</Bucket><Key>object</Key>'
            '<UploadId>id</UploadId><IsTruncated>true</IsTruncated>'
            '<NextPartNumberMarker>2</NextPartNumberMarker>'
            '<Part><PartNumber>1</PartNumber><ETag>"e1"</ETag>'
            '<Size>5</Size></Part>'
            '<Part><PartNumber>2</PartNumber><ETag>"e2"</ETag>'
            '<LastModified>2016-11-27T07:10:27Z</LastModified></Part>'
            '</ListPartsResult>'
        ))
        self.assertEqual(result.upload_id, 'id')
        self.assertTrue(result.is_truncated)
        self.assertEqual(result.next_part_number_marker, 2)
        self.assertEqual(
            [(part.part_number, part.etag) for part in result.parts],
            [(1, 'e1'), (2, 'e2')],
        )
        self.assertEqual(result.parts[0].size, 5)
        self.assertEqual(
            result.parts[1].last_modified,
            datetime(2016, 11, 27, 7, 10, 27, tzinfo=timezone.utc),
        )

    def test_list_uploads(self):
        result = ListMultipartUploadsResult.fromxml(fromstring(
            '<ListMultipartUploadsResult><Bucket>bucket</Bucket>'
            '<IsTruncated>false</IsTruncated>'
            '<Upload><Key>object</Key><UploadId>id</UploadId>'
            '<Initiated>2016-11-27T07:10:27.000Z</Initiated></Upload>'
            '</ListMultipartUploadsResult>'
        ))
        self.assertEqual(result.bucket_name, 'bucket')
        self.assertEqual(result.uploads[0].object_name, 'object')
        self.assertEqual(result.uploads[0].upload_id, 'id')
        self.assertIsNone(result.next_key_marker)

    def test_upload_id(self):
        self.assertEqual(parse_upload_id(fromstring(
            '<InitiateMultipartUploadResult><Bucket>b</Bucket><Key>k</Key>'
            '<UploadId>upload</UploadId></InitiateMultipartUploadResult>'
        )), 'upload')
        self.assertRaises(
            ValueError, parse_upload_id,
            fromstring('<InitiateMultipartUploadResult/>'),
        )

    def test_complete(self):
        result = CompleteMultipartUploadResult.fromxml(fromstring(
            '<CompleteMultipartUploadResult><Location>http://l/b/k</Location>'
            '<Bucket>b</Bucket><Key>k</Key><ETag>"abc-2"</ETag>'
            '</CompleteMultipartUploadResult>'
        ), 'v1')
        self.assertEqual(result.etag, 'abc-2')
        self.assertEqual(result.location, 'http://l/b/k')
        self.assertEqual(result.version_id, 'v1')
