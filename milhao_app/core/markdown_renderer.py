"""Markdown rendering shared by the Qt window and the browser player.

Question text and answer explanations may carry light markdown (emphasis,
book references in bold). Both front ends display the same HTML fragment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

from milhao_app.core.models import Question


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>Sem conteúdo.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line (an answer option) without wrapping paragraphs."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return escape("(vazio)")
        return self._markdown.renderInline(sanitized)

    def render_question(self, question: Question) -> dict[str, object]:
        return {
            "text_html": self.render_fragment(question.text),
            "options_html": [self.render_inline(option) for option in question.options],
        }


renderer = MarkdownRenderer()
# MarkdownIt is safe for concurrent read-only renders, so the API thread and
# the Qt thread share this instance.
