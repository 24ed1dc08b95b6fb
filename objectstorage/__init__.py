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
objectstorage - low level client for Amazon S3 compatible object storage

    >>> from objectstorage import ObjectStorage
    >>> client = ObjectStorage(
    ...     "play.min.io",
    ...     access_key="Q3AM3UQ867SPQQA43P2F",
    ...     secret_key="zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
    ... )
    >>> for bucket in client.list_buckets():
    ...     print(bucket.name, bucket.creation_date)

:copyright: (C) 2015-2025 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "objectstorage-py"
__author__ = "MinIO, Inc."
__version__ = "0.3.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2015-2025 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias,wrong-import-position
from .api import ObjectStorage as ObjectStorage
from .credentials import Credentials as Credentials
from .error import AccessDenied as AccessDenied
from .error import BucketAlreadyExists as BucketAlreadyExists
from .error import BucketNotEmpty as BucketNotEmpty
from .error import EntityTooLarge as EntityTooLarge
from .error import InvalidArgument as InvalidArgument
from .error import InvalidState as InvalidState
from .error import NoSuchBucket as NoSuchBucket
from .error import NoSuchKey as NoSuchKey
from .error import NoSuchUpload as NoSuchUpload
from .error import ObjectStorageError as ObjectStorageError
from .error import ServerError as ServerError
from .error import TransportError as TransportError
from .multipart import MultipartUpload as MultipartUpload
from .multipart import UploadState as UploadState
