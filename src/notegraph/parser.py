"""WikiLink and YAML-frontmatter parsing for note content."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterator

import yaml

# [[Target]], [[Target#Section]], [[Target|Alias]], [[Target#Section|Alias]]
# (embeds, ![[Target]], match too)
_WIKILINK_RE = re.compile(r"\[\[([^\]#|]+)(?:#([^\]|]*))?(?:\|([^\]]*))?\]\]")
# Fenced code block (an unclosed fence runs to the end of the document) or
# a single-line inline code span
_CODE_RE = re.compile(
    r"^[ \t]*(?P<fence>`{3,}|~{3,})[^\n]*\n.*?(?:^[ \t]*(?P=fence)[`~]*[ \t]*$|\Z)"
    r"|(?<!`)(?P<tick>`+)(?!`)[^\n]+?(?<!`)(?P=tick)(?!`)",
    re.MULTILINE | re.DOTALL,
)
# YAML front-matter block
_FRONTMATTER_RE = re.compile(r"^---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


@dataclass(frozen=True)
class WikiLink:
    target: str
    section: str | None = None
    alias: str | None = None


def _link_from_match(m: re.Match[str]) -> WikiLink | None:
    target = m.group(1).strip()
    if not target:
        return None
    return WikiLink(target=target, section=m.group(2), alias=m.group(3))


def strip_code(text: str) -> str:
    """Blank out fenced blocks and inline code spans so their links are ignored."""
    return _CODE_RE.sub("", text)


def iter_wikilinks(text: str) -> Iterator[WikiLink]:
    """Yield every ``[[WikiLink]]`` occurrence in *text*, outside code."""
    for m in _WIKILINK_RE.finditer(strip_code(text)):
        link = _link_from_match(m)
        if link is not None:
            yield link


def replace_wikilinks(text: str, repl: Callable[[WikiLink], str]) -> str:
    """Replace every ``[[WikiLink]]`` outside code with ``repl(link)``.

    Code blocks and inline code spans are copied through untouched.
    """

    def _sub(m: re.Match[str]) -> str:
        link = _link_from_match(m)
        return m.group(0) if link is None else repl(link)

    parts: list[str] = []
    pos = 0
    for code in _CODE_RE.finditer(text):
        parts.append(_WIKILINK_RE.sub(_sub, text[pos : code.start()]))
        parts.append(code.group(0))
        pos = code.end()
    parts.append(_WIKILINK_RE.sub(_sub, text[pos:]))
    return "".join(parts)


def parse_wikilinks(text: str) -> list[str]:
    """Return the target of every ``[[WikiLink]]`` in *text*.

    Repeated links are kept, once per occurrence, in document order.
    Section and alias fragments are dropped.
    """
    return [link.target for link in iter_wikilinks(text)]


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split YAML front-matter from body text.

    Returns ``(metadata_dict, body)``; ``metadata_dict`` is empty when there
    is no front-matter block or it is not a YAML mapping.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content
    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}
    if not isinstance(meta, dict):
        meta = {}
    return meta, content[match.end() :]
