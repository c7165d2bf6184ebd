"""Pydantic models for the stylesheet snapshot taken from a loaded page.

The browser session serialises ``document.styleSheets`` into this
shape so that extraction runs as ordinary host-side code.  Each sheet
is either :class:`Accessible` (its top-level rules could be read) or
:class:`Inaccessible` (the browser refused access, typically a
cross-origin sheet).
"""

from __future__ import annotations

from typing import Annotated, Literal

import pydantic

from mediascope.utils.serialization import CAMEL_CONFIG


class StyleRuleNode(pydantic.BaseModel):
    """A plain selector + declaration block."""

    kind: Literal["style"] = "style"
    selector: str
    properties: dict[str, str] = pydantic.Field(default_factory=dict)


class OtherRuleNode(pydantic.BaseModel):
    """Any rule the extractor does not inspect (``@font-face``, ``@supports``, ...)."""

    model_config = CAMEL_CONFIG

    kind: Literal["other"] = "other"
    rule_type: str = "unknown"


class MediaRuleNode(pydantic.BaseModel):
    """An ``@media`` block and the rules nested directly inside it."""

    kind: Literal["media"] = "media"
    condition: str
    rules: list[Annotated[StyleRuleNode | OtherRuleNode, pydantic.Field(discriminator="kind")]] = pydantic.Field(
        default_factory=list
    )


CssRuleNode = Annotated[
    StyleRuleNode | MediaRuleNode | OtherRuleNode,
    pydantic.Field(discriminator="kind"),
]


class Accessible(pydantic.BaseModel):
    """Top-level rules of a readable stylesheet, in document order."""

    kind: Literal["accessible"] = "accessible"
    rules: list[CssRuleNode] = pydantic.Field(default_factory=list)


class Inaccessible(pydantic.BaseModel):
    """A stylesheet whose rules the browser refused to expose."""

    kind: Literal["inaccessible"] = "inaccessible"
    reason: str = ""


AccessResult = Annotated[Accessible | Inaccessible, pydantic.Field(discriminator="kind")]


class StyleSheetSource(pydantic.BaseModel):
    """One entry of ``document.styleSheets``."""

    href: str | None = None
    access: AccessResult
