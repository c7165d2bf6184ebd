"""
In-page stylesheet snapshot.
Serialises ``document.styleSheets`` into plain JSON so extraction can
run host-side against :mod:`mediascope.models.stylesheet`.
"""

from __future__ import annotations

from typing import Any

import pydantic

from mediascope.models import stylesheet
from mediascope.utils import logger

log = logger.create_logger("StylesheetSnapshot")

# Reading cssRules on a cross-origin sheet throws a SecurityError; the
# sheet is reported as inaccessible rather than failing the snapshot.
SNAPSHOT_SCRIPT = """() => {
    const typeName = (rule) => rule.constructor ? rule.constructor.name : String(rule.type);
    const styleRule = (rule) => {
        const properties = {};
        for (let i = 0; i < rule.style.length; i++) {
            const prop = rule.style[i];
            properties[prop] = rule.style.getPropertyValue(prop);
        }
        return { kind: 'style', selector: rule.selectorText, properties };
    };

    const sheets = [];
    for (const sheet of document.styleSheets) {
        let rules;
        try {
            rules = sheet.cssRules || sheet.rules;
        } catch (err) {
            sheets.push({ href: sheet.href, access: { kind: 'inaccessible', reason: String(err && err.message || err) } });
            continue;
        }
        if (!rules) {
            sheets.push({ href: sheet.href, access: { kind: 'inaccessible', reason: 'No rule list exposed' } });
            continue;
        }

        const out = [];
        for (const rule of rules) {
            if (rule.type === CSSRule.STYLE_RULE) {
                out.push(styleRule(rule));
            } else if (rule.type === CSSRule.MEDIA_RULE) {
                const inner = [];
                for (const child of rule.cssRules) {
                    inner.push(child.type === CSSRule.STYLE_RULE
                        ? styleRule(child)
                        : { kind: 'other', ruleType: typeName(child) });
                }
                out.push({ kind: 'media', condition: rule.media.mediaText, rules: inner });
            } else {
                out.push({ kind: 'other', ruleType: typeName(rule) });
            }
        }
        sheets.push({ href: sheet.href, access: { kind: 'accessible', rules: out } });
    }
    return sheets;
}"""

_SHEETS_ADAPTER = pydantic.TypeAdapter(list[stylesheet.StyleSheetSource])


def to_sources(raw: Any) -> list[stylesheet.StyleSheetSource]:
    """Validate the snapshot script's return value.

    Raises:
        pydantic.ValidationError: If *raw* does not match the
            stylesheet model.
    """
    sources = _SHEETS_ADAPTER.validate_python(raw)
    log.debug(
        "Stylesheet snapshot",
        {
            "stylesheets": len(sources),
            "inaccessible": sum(1 for s in sources if isinstance(s.access, stylesheet.Inaccessible)),
        },
    )
    return sources
