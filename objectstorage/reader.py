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
objectstorage.reader

This module implements a section reader over a binary stream.

A SectionReader reads from *reader* but stops with EOF after *limit*
bytes; a reader ending earlier raises InvalidArgument. When the wrapped
reader is seekable, the section is seekable too, relative to the position
the wrapped reader had on construction; this lets the transport rewind the
body when a request is retried.

:copyright: (c) 2015 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import io
from typing import BinaryIO

from .error import InvalidArgument


class SectionReader(io.RawIOBase):
    """
    SectionReader returns a reader that reads from *reader*
    and stops with EOF after *limit* bytes.

    :param reader: Input binary stream.
    :param limit: Trigger EOF after limit bytes.
    """

    def __init__(self, reader: BinaryIO, limit: int):
        super().__init__()
        self._reader = reader
        self._limit = limit
        self._offset = 0
        self._start = None
        if self._is_seekable():
            self._start = reader.tell()

    def _is_seekable(self) -> bool:
        seekable = getattr(self._reader, "seekable", None)
        try:
            return bool(seekable and seekable())
        except (OSError, ValueError):
            return False

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return self._start is not None

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes; never beyond the section limit."""
        remaining = self._limit - self._offset
        if remaining <= 0:
            return b""
        if size is None or size < 0 or size > remaining:
            size = remaining
        data = self._reader.read(size)
        if not data:
            raise InvalidArgument(
                f"stream ended after {self._offset} of {self._limit} bytes",
            )
        if not isinstance(data, bytes):
            raise ValueError("read() must return 'bytes' object")
        self._offset += len(data)
        return data

    def readinto(self, buffer) -> int:
        data = self.read(len(buffer))
        buffer[:len(data)] = data
        return len(data)

    def tell(self) -> int:
        if self._start is None:
            raise io.UnsupportedOperation("underlying reader is not seekable")
        return self._offset

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Reposition within the section."""
        if self._start is None:
            raise io.UnsupportedOperation("underlying reader is not seekable")
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._offset + offset
        elif whence == io.SEEK_END:
            position = self._limit + offset
        else:
            raise ValueError(f"invalid whence {whence}")
        if not 0 <= position <= self._limit:
            raise ValueError(f"offset {position} is out of section bounds")
        self._reader.seek(self._start + position)
        self._offset = position
        return position
