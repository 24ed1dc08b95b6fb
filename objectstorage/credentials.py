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

"""Credentials used to sign requests to S3 service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """
    Access key, secret key and optional session token of an account.

    The client only keeps a reference to this object; loading credentials
    from environment or configuration files is the caller's concern.
    """

    access_key: str
    secret_key: str
    session_token: Optional[str] = None

    def __post_init__(self):
        if not self.access_key:
            raise ValueError("Access key must not be empty")

        if not self.secret_key:
            raise ValueError("Secret key must not be empty")

    def __repr__(self):
        return (
            f"Credentials(access_key={self.access_key!r}, "
            f"secret_key=*REDACTED*, "
            f"session_token={'*REDACTED*' if self.session_token else None})"
        )
