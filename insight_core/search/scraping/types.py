# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from pydantic import BaseModel


class ScrapedContent(BaseModel):
    url: str
    content: str
