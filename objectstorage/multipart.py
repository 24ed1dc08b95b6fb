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
objectstorage.multipart
~~~~~~~~~~~~~~~~~~~~~~~

This module implements the multipart upload session handle.

A session moves through the states below; any other transition raises
:class:`InvalidState`::

    INITIATED --upload_part--> PARTS_UPLOADING --complete--> COMPLETED
    INITIATED | PARTS_UPLOADING --abort--> ABORTED

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import threading
from dataclasses import replace
from enum import Enum
from typing import Iterable, Optional

from .datatypes import Part
from .error import InvalidArgument, InvalidState
from .helpers import check_part_number


class UploadState(Enum):
    """State of a multipart upload session."""
    INITIATED = "Initiated"
    PARTS_UPLOADING = "PartsUploading"
    COMPLETED = "Completed"
    ABORTED = "Aborted"

    @property
    def is_terminal(self) -> bool:
        """Check whether no further operation is accepted."""
        return self in (UploadState.COMPLETED, UploadState.ABORTED)


class MultipartUpload:
    """
    Handle of a multipart upload owned by the caller.

    Part uploads of one session may run concurrently from several threads;
    the state and the recorded parts are guarded by a lock that is never
    held across a network call. Complete and abort claim the session with
    :meth:`begin` so only one of them is in flight at a time.
    """

    def __init__(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
            state: UploadState = UploadState.INITIATED,
    ):
        self._bucket_name = bucket_name
        self._object_name = object_name
        self._upload_id = upload_id
        self._state = state
        self._parts: dict[int, Part] = {}
        self._pending: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def bucket_name(self) -> str:
        """Get bucket name."""
        return self._bucket_name

    @property
    def object_name(self) -> str:
        """Get object name."""
        return self._object_name

    @property
    def upload_id(self) -> str:
        """Get upload ID issued by the server."""
        return self._upload_id

    @property
    def state(self) -> UploadState:
        """Get current state."""
        with self._lock:
            return self._state

    @property
    def parts(self) -> list[Part]:
        """Get successfully uploaded parts ordered by part number."""
        with self._lock:
            return [self._parts[number] for number in sorted(self._parts)]

    def __repr__(self):
        return (
            f"MultipartUpload(bucket_name={self._bucket_name!r}, "
            f"object_name={self._object_name!r}, "
            f"upload_id={self._upload_id!r}, state={self.state.value})"
        )

    def _check_state(self, operation: str, allowed: tuple[UploadState, ...]):
        if self._state not in allowed:
            raise InvalidState(
                f"{operation} is not allowed in state "
                f"{self._state.value} of upload {self._upload_id}",
                bucket_name=self._bucket_name,
                object_name=self._object_name,
            )

    def check_state(self, operation: str, *allowed: UploadState):
        """Raise InvalidState unless current state is one of allowed."""
        with self._lock:
            self._check_state(operation, allowed)

    def record_part(self, part: Part):
        """Record uploaded part; first part moves session to uploading."""
        with self._lock:
            if self._state.is_terminal:
                # Upload raced with complete/abort; its status is undefined.
                return
            self._parts[part.part_number] = part
            self._state = UploadState.PARTS_UPLOADING

    def manifest(self, parts: Optional[Iterable[Part]] = None) -> list[Part]:
        """
        Validate the part list to complete with; default to recorded parts.

        Parts must be non-empty, unique, in range and in ascending order,
        and must not contradict an ETag recorded by this session. Returned
        parts carry ETags without quotes.
        """
        with self._lock:
            parts = [
                replace(part, etag=part.etag.replace('"', ""))
                for part in (
                    parts if parts is not None
                    else [self._parts[n] for n in sorted(self._parts)]
                )
            ]
            recorded = dict(self._parts)

        if not parts:
            raise InvalidArgument(
                "at least one part is required to complete upload "
                f"{self._upload_id}",
                bucket_name=self._bucket_name,
                object_name=self._object_name,
            )

        previous = 0
        for part in parts:
            check_part_number(part.part_number)
            if part.part_number <= previous:
                raise InvalidArgument(
                    "parts must be listed in ascending order without "
                    f"duplicates; got part {part.part_number} after "
                    f"{previous}",
                    bucket_name=self._bucket_name,
                    object_name=self._object_name,
                )
            previous = part.part_number
            known = recorded.get(part.part_number)
            if known is not None and known.etag != part.etag:
                raise InvalidArgument(
                    f"ETag {part.etag} of part {part.part_number} does not "
                    f"match uploaded ETag {known.etag}",
                    bucket_name=self._bucket_name,
                    object_name=self._object_name,
                )
        return parts

    def begin(self, operation: str, *allowed: UploadState):
        """
        Claim the session for a terminal operation, i.e. complete or abort.

        Raise InvalidState unless current state is one of allowed and no
        other terminal operation is in flight. Call :meth:`finish` once the
        request is done.
        """
        with self._lock:
            if self._pending is not None:
                raise InvalidState(
                    f"{operation} is not allowed while {self._pending} of "
                    f"upload {self._upload_id} is in progress",
                    bucket_name=self._bucket_name,
                    object_name=self._object_name,
                )
            self._check_state(operation, allowed)
            self._pending = operation

    def finish(self, state: Optional[UploadState] = None):
        """Release the claim; move to state if given."""
        with self._lock:
            self._pending = None
            if state is not None:
                self._state = state
