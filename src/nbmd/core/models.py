"""Data models for parse options, extracted metadata, and pipeline stages"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from nbmd.core.utils.stash import Stash


class ParseOptions(BaseModel):
    """Per-call parser options; immutable once built.

    Accepts snake_case field names or their camelCase aliases; unknown keys are rejected.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    sanitize:         bool = Field(default=True,  description="Clean final HTML against the tag allow-list")
    links_in_new_tab: bool = Field(default=True,  alias="linksInNewTab",
                                   description="Add target=_blank rel=noopener to links")
    class_prefix:     str  = Field(default="nb-md", alias="classPrefix", pattern=r"^[A-Za-z][A-Za-z0-9-]*$",
                                   description="Prefix for every emitted CSS class")
    gfm:              bool = Field(default=True,  description="Enable pipe tables")
    math:             bool = Field(default=False, description="Accepted for compatibility; no math stage exists")
    unique_ids:       bool = Field(default=False, alias="uniqueIds",
                                   description="Suffix repeated heading ids with -1, -2, ...")


DEFAULT_OPTIONS = ParseOptions()


class Heading(BaseModel):
    level: int = Field(..., ge=1, le=6)
    text: str
    id: str


class Link(BaseModel):
    text: str
    url: str
    title: Optional[str] = None


class Image(BaseModel):
    alt: str
    src: str
    title: Optional[str] = None


class CodeBlock(BaseModel):
    """A fenced code block; inline code spans are not recorded."""
    language: Optional[str] = None
    code: str


class ExtractedMetadata(BaseModel):
    """Constructs rewritten during one parse, each list in document order."""
    headings:    list[Heading]   = Field(default_factory=list)
    links:       list[Link]      = Field(default_factory=list)
    images:      list[Image]     = Field(default_factory=list)
    code_blocks: list[CodeBlock] = Field(default_factory=list)


class ParsedResult(BaseModel):
    html: str
    metadata: ExtractedMetadata = Field(default_factory=ExtractedMetadata)


@dataclass
class RenderContext:
    """State shared by the stages of a single parse call."""
    options: ParseOptions = field(default_factory=ParseOptions)
    stash:   Stash = field(default_factory=Stash)


@dataclass
class StageResult:
    """Stage output: rewritten text plus partial metadata keyed by ExtractedMetadata field."""
    text:     str
    metadata: dict[str, list[Any]] = field(default_factory=dict)


Stage = Callable[[str, RenderContext], StageResult]
