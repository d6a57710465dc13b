"""Serialization of Prismic structured text.

``as_html`` mirrors what the Prismic DOM helpers emit: one element per node,
consecutive list items grouped into a single list, text escaped with newlines
turned into ``<br />`` and nodes concatenated without a separator.
"""
from typing import Sequence

from markupsafe import escape

from spacetraveling.schemas.post import RichTextSpan, SpanAnnotation

BLOCK_TAGS = {
    "paragraph": "p",
    "preformatted": "pre",
    "heading1": "h1",
    "heading2": "h2",
    "heading3": "h3",
    "heading4": "h4",
    "heading5": "h5",
    "heading6": "h6",
}

LIST_TAGS = {
    "list-item": "ul",
    "o-list-item": "ol",
}


def _escape_text(text: str) -> str:
    return str(escape(text)).replace("\n", "<br />")


def _open_tag(span: SpanAnnotation) -> str:
    if span.type == "strong":
        return "<strong>"
    if span.type == "em":
        return "<em>"
    if span.type == "hyperlink":
        target = ""
        if span.data.get("target"):
            target = f' target="{escape(span.data["target"])}" rel="noopener"'
        return f'<a href="{escape(span.data.get("url", ""))}"{target}>'
    if span.type == "label":
        return f'<span class="{escape(span.data.get("label", ""))}">'
    return "<span>"


def _close_tag(span: SpanAnnotation) -> str:
    if span.type == "strong":
        return "</strong>"
    if span.type == "em":
        return "</em>"
    if span.type == "hyperlink":
        return "</a>"
    return "</span>"


def _serialize_spans(text: str, spans: Sequence[SpanAnnotation]) -> str:
    length = len(text)
    ranges = [
        (max(0, s.start), min(length, s.end), s)
        for s in spans
        if min(length, s.end) > max(0, s.start)
    ]
    if not ranges:
        return _escape_text(text)

    # Outer spans open first
    ranges.sort(key=lambda r: (r[0], -r[1]))
    boundaries = sorted({0, length} | {r[0] for r in ranges} | {r[1] for r in ranges})

    out = []
    stack = []  # (end, span)
    for i, pos in enumerate(boundaries):
        # Close everything down to the deepest span ending here, then reopen
        # the survivors so tags stay properly nested.
        if any(end <= pos for end, _ in stack):
            reopen = []
            while any(end <= pos for end, _ in stack):
                end, span = stack.pop()
                out.append(_close_tag(span))
                if end > pos:
                    reopen.append((end, span))
            for end, span in reversed(reopen):
                stack.append((end, span))
                out.append(_open_tag(span))

        for start, end, span in ranges:
            if start == pos:
                stack.append((end, span))
                out.append(_open_tag(span))

        if i + 1 < len(boundaries):
            out.append(_escape_text(text[pos:boundaries[i + 1]]))

    return "".join(out)


def _serialize_node(node: RichTextSpan) -> str:
    if node.type == "image":
        return (
            f'<p class="block-img"><img src="{escape(node.url or "")}" '
            f'alt="{escape(node.alt or "")}" /></p>'
        )
    if node.type == "embed":
        oembed = node.oembed or {}
        return (
            f'<div data-oembed="{escape(oembed.get("embed_url", ""))}" '
            f'data-oembed-type="{escape(oembed.get("type", ""))}">'
            f'{oembed.get("html") or ""}</div>'
        )
    inner = _serialize_spans(node.text, node.spans)
    if node.type in LIST_TAGS:
        return f"<li>{inner}</li>"
    tag = BLOCK_TAGS.get(node.type, "p")
    return f"<{tag}>{inner}</{tag}>"


def as_html(body: Sequence[RichTextSpan]) -> str:
    parts = []
    open_list = None
    for node in body:
        list_tag = LIST_TAGS.get(node.type)
        if open_list and list_tag != open_list:
            parts.append(f"</{open_list}>")
            open_list = None
        if list_tag and not open_list:
            parts.append(f"<{list_tag}>")
            open_list = list_tag
        parts.append(_serialize_node(node))
    if open_list:
        parts.append(f"</{open_list}>")
    return "".join(parts)


def as_text(body: Sequence[RichTextSpan], join: str = " ") -> str:
    return join.join(node.text for node in body if node.text)
