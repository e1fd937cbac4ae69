"""
/**
 * @file smart_translate/utils/markup_utils.py
 * @description HTML 标记结构比对工具：确保译文保留原有标签与属性。
 */
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

_ATTR = r"""\s+[A-Za-z_:@][-\w:.@]*(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?"""
TAG_RE = re.compile(
    r"<!--.*?-->"
    r"|<![A-Za-z][^<>]*>"
    r"|</(?P<close>[A-Za-z][A-Za-z0-9-]*)\s*>"
    r"|<(?P<open>[A-Za-z][A-Za-z0-9-]*)(?:" + _ATTR + r")*\s*(?P<selfclose>/?)>",
    re.DOTALL,
)

VOID_ELEMENTS = {
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
}


def _markup_matches(text: str) -> List["re.Match[str]"]:
    """Markup tokens of ``text`` in document order.

    A start tag only counts when it is void, self-closing or closed later on, and an
    end tag only when it closes an earlier start tag, so comparisons such as
    ``a<b alors b>c`` stay plain text.
    """
    matches = list(TAG_RE.finditer(text or ""))
    kept = [False] * len(matches)
    open_stack: Dict[str, List[int]] = {}

    for i, m in enumerate(matches):
        name: Optional[str] = m.group("open")
        close: Optional[str] = m.group("close")
        if name is None and close is None:
            kept[i] = True
        elif name is not None:
            lowered = name.lower()
            if m.group("selfclose") or lowered in VOID_ELEMENTS:
                kept[i] = True
            else:
                open_stack.setdefault(lowered, []).append(i)
        else:
            pending = open_stack.get(close.lower())
            if pending:
                kept[pending.pop()] = True
                kept[i] = True

    return [m for m, keep in zip(matches, kept) if keep]


def extract_tags(text: str) -> List[str]:
    """Return every markup token of ``text`` in document order, verbatim."""
    return [m.group(0) for m in _markup_matches(text)]


def has_markup(text: str) -> bool:
    return bool(extract_tags(text))


def preserves_markup(source: str, translated: str) -> bool:
    """True when ``translated`` carries exactly the tags of ``source`` in the same order."""
    return extract_tags(source) == extract_tags(translated)


def text_nodes(text: str) -> List[str]:
    text = text or ""
    nodes, pos = [], 0
    for m in _markup_matches(text):
        start, end = m.span()
        nodes.append(text[pos:start])
        pos = end
    nodes.append(text[pos:])
    return [part for part in nodes if part.strip()]
