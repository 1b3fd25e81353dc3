"""Data models for the parse and build pipeline"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """Public output contract: one rendered, non-draft document. Field order is JSON key order."""
    model_config = ConfigDict(frozen=True)

    title:    str = ""
    slug:     str
    date:     str = ""
    summary:  str = ""
    tags:     list[str] = Field(default_factory=list)
    featured: bool = False
    content:  str = ""             # rendered HTML


@dataclass
class ParsedDoc:
    """Internal parse result; not persisted."""
    path:     Path
    metadata: dict[str, Any]       # front matter as scanned, no defaults applied
    body:     str                  # markdown after the front-matter block
