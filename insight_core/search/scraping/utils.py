# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


# Portions of this file are derived from the Apache 2.0 licensed project "gpt-researcher"
# Original source: https://github.com/assafelovic/gpt-researcher
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Changes made:
# - Content region selection via CSS selectors
# - Whitespace normalization only, no markdown conversion

import re

from bs4 import BeautifulSoup

NOISE_TAGS = ["script", "style"]


def parse_html(markup: str | bytes, encoding: str | None = None) -> BeautifulSoup:
    return BeautifulSoup(markup, "lxml", from_encoding=encoding if isinstance(markup, bytes) else None)


def clean_soup(soup: BeautifulSoup) -> BeautifulSoup:
    """Drop elements that never hold readable content."""
    for tag in soup(NOISE_TAGS):
        tag.decompose()
    return soup


def normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def get_text_from_soup(soup: BeautifulSoup, content_selector: str) -> str:
    """
    Text of the first element matching `content_selector`, falling back to the whole body when there
    is no such element or it holds no text.
    """
    region = soup.select_one(content_selector)
    text = normalize_whitespace(region.get_text(separator=" ")) if region is not None else ""

    if not text:
        body = soup.body
        text = normalize_whitespace(body.get_text(separator=" ")) if body is not None else ""

    return text
