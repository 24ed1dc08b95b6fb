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

"""Time formatter for S3 APIs."""

from __future__ import absolute_import, annotations

from datetime import datetime, timezone

_WEEK_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct",
           "Nov", "Dec"]


def _to_utc(value: datetime) -> datetime:
    """Convert to naive UTC time if value is timezone aware."""
    return (
        value.astimezone(timezone.utc).replace(tzinfo=None)
        if value.tzinfo else value
    )


def utcnow() -> datetime:
    """Current time in UTC; the default clock of request builders."""
    return datetime.now(timezone.utc)


def from_iso8601utc(value: str | None) -> datetime | None:
    """Parse UTC ISO-8601 formatted string to datetime."""
    if value is None:
        return None

    try:
        time = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ")
    except ValueError:
        time = datetime.strptime(value, "%Y-%m-%dT%H:%M:%SZ")
    return time.replace(tzinfo=timezone.utc)


def from_http_header(value: str) -> datetime:
    """
    Parse HTTP header date like 'Mon, 02 Mar 2015 07:28:00 GMT'.

    Day and month names are matched against fixed English tables so the
    result does not depend on the process locale.
    """
    if len(value) != 29 or value[3] != "," or value[0:3] not in _WEEK_DAYS:
        raise ValueError(
            f"time data {value} does not match HTTP header format")

    if value[8:11] not in _MONTHS:
        raise ValueError(
            f"time data {value} does not match HTTP header format")

    day = datetime.strptime(value[4:8], " %d ").day
    time = datetime.strptime(value[11:], " %Y %H:%M:%S GMT").replace(
        day=day, month=_MONTHS.index(value[8:11]) + 1, tzinfo=timezone.utc,
    )

    if _WEEK_DAYS.index(value[0:3]) != time.weekday():
        raise ValueError(
            f"time data {value} does not match HTTP header format")
    return time


def to_amz_date(value: datetime) -> str:
    """Format datetime into AMZ date formatted string."""
    return _to_utc(value).strftime("%Y%m%dT%H%M%SZ")


def to_signer_date(value: datetime) -> str:
    """Format datetime into SignatureV4 date formatted string."""
    return _to_utc(value).strftime("%Y%m%d")
