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

"""XML encoding and decoding functions."""

from __future__ import annotations

import io
from typing import Optional
from xml.etree import ElementTree as ET

S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def fromstring(data: bytes | str) -> ET.Element:
    """
    Parse XML document and drop namespaces from all tags so lookups work
    the same for namespaced and plain responses.
    """
    root = ET.fromstring(data)
    for element in root.iter():
        element.tag = _local_name(element.tag)
    return root


def findall(element: ET.Element, name: str) -> list[ET.Element]:
    """ElementTree.Element.findall() on a namespace-free tree."""
    return element.findall(name)


def find(
        element: ET.Element,
        name: str,
        strict: bool = False,
) -> Optional[ET.Element]:
    """ElementTree.Element.find() raising ValueError if strict and absent."""
    elem = element.find(name)
    if strict and elem is None:
        raise ValueError(f"XML element <{name}> not found")
    return elem


def findtext(
        element: ET.Element,
        name: str,
        strict: bool = False,
        default: Optional[str] = None,
) -> Optional[str]:
    """
    ElementTree.Element.findtext() with strict flag raises ValueError if
    element name not exist.
    """
    elem = find(element, name, strict=strict)
    return default if elem is None else (elem.text or "")


def Element(tag: str) -> ET.Element:  # pylint: disable=invalid-name
    """Create root element in S3 namespace."""
    return ET.Element(tag, {"xmlns": S3_NAMESPACE})


def SubElement(  # pylint: disable=invalid-name
        parent: ET.Element, tag: str, text: Optional[str] = None,
) -> ET.Element:
    """Create ElementTree.SubElement on parent with tag and text."""
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def getbytes(element: ET.Element) -> bytes:
    """Convert ElementTree.Element to bytes."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(
            data, encoding=None, xml_declaration=False,
        )
        return data.getvalue()
