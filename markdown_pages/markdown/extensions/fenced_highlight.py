# markdown_pages/markdown/extensions/fenced_highlight.py
"""
Fenced code blocks highlighted with Pygments.

    ```ruby
    puts 'hello'
    ```

renders as a single block:

    <div class="language-ruby highlighter-rouge"><div class="highlight"><pre class="highlight"><code><span class="nb">puts</span> <span class="s1">'hello'</span>
    </code></pre></div></div>

Tokens are wrapped in spans carrying Pygments' short CSS class names, so any
Pygments style sheet (see highlight_stylesheet) colours them. Plain text and
whitespace are left unwrapped. Fences may be indented inside list items or
quoted inside blockquotes. A fence that is never closed is a RenderError.
"""

import logging
import re
from html import escape

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.token import STANDARD_TYPES, Text
from pygments.util import ClassNotFound

from ..errors import RenderError

logger = logging.getLogger(__name__)

# Backtick fences may not have backticks in their info string
_OPEN_FENCE_RE = re.compile(
    r"^(?P<prefix>(?:[ ]{0,3}>[ ]?)*)(?P<indent>[ ]*)"
    r"(?P<fence>`{3,}(?=[^`]*$)|~{3,})(?P<info>.*)$"
)
_LIST_ITEM_RE = re.compile(r"^[ ]*(?:[*+-]|\d+[.)])[ ]+\S")


def _css_class(ttype) -> str:
    """Short Pygments class name, e.g. String.Single -> 's1'."""
    fname = STANDARD_TYPES.get(ttype)
    if fname is not None:
        return fname
    suffix = ""
    while fname is None:
        suffix = f"-{ttype[-1]}{suffix}"
        ttype = ttype.parent
        fname = STANDARD_TYPES.get(ttype)
    return fname + suffix


def _span(css_class: str, value: str) -> str:
    value = escape(value, quote=False)
    if not css_class:
        return value
    return f'<span class="{css_class}">{value}</span>'


def format_tokens(tokens) -> str:
    """
    Render a Pygments token stream, merging runs of the same class.

    HtmlFormatter(nowrap=True) is not used because it wraps whitespace in
    <span class="w"> and escapes quotes as &#39;, neither of which Rouge
    markup has.
    """
    parts = []
    current_class, current_value = None, ""
    for ttype, value in tokens:
        css_class = "" if ttype in Text else _css_class(ttype)
        if css_class == current_class:
            current_value += value
            continue
        if current_class is not None:
            parts.append(_span(current_class, current_value))
        current_class, current_value = css_class, value
    if current_class is not None:
        parts.append(_span(current_class, current_value))
    return "".join(parts)


def highlight_code(code: str, lang: str = "") -> str:
    """Highlight code into the language-<lang> highlighter-rouge wrapper."""
    try:
        lexer = get_lexer_by_name(lang) if lang else TextLexer()
    except ClassNotFound:
        logger.warning(f"No highlighter for language {lang!r}, rendering as plain text")
        lexer = TextLexer()

    body = format_tokens(lexer.get_tokens(code))
    classes = f"language-{lang} highlighter-rouge" if lang else "highlighter-rouge"
    return (
        f'<div class="{escape(classes)}"><div class="highlight">'
        f'<pre class="highlight"><code>{body}</code></pre></div></div>'
    )


def highlight_stylesheet(theme: str = "default") -> str:
    """CSS rules for the given Pygments style, scoped to .highlight"""
    return HtmlFormatter(style=theme).get_style_defs(".highlight")


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _strip_prefix(line: str, prefix: str):
    """The line with its blockquote prefix removed, or None if it lacks one."""
    if line.startswith(prefix):
        return line[len(prefix):]
    if line.strip() == prefix.strip():
        return ""
    return None


def _is_blank(line: str, prefix: str) -> bool:
    return not line.strip() or line.strip() == prefix.strip()


class FencedHighlightPreprocessor(Preprocessor):
    """
    Replaces every fenced code block with a stashed placeholder line.

    Fences may sit inside blockquotes and, indented, inside list items. The
    placeholder keeps the fence's container prefix so python-markdown nests
    it where the fence was. Blank lines are added around it where the source
    has none; md.fence_joins records which, keyed by placeholder.
    """

    def _continues_list_item(self, lines, index: int, prefix: str, indent: int) -> bool:
        for line in reversed(lines[:index]):
            body = _strip_prefix(line, prefix)
            if body is None:
                return False
            if not body.strip():
                continue
            if _indent_width(body) < indent:
                return bool(_LIST_ITEM_RE.match(body))
        return False

    def _opens_fence(self, lines, index: int, match) -> bool:
        indent = len(match.group("indent"))
        # Four spaces outside a list item is an indented code block
        return indent < 4 or self._continues_list_item(
            lines, index, match.group("prefix"), indent
        )

    def run(self, lines):
        self.md.fence_joins = {}
        output = []
        index = 0
        while index < len(lines):
            match = _OPEN_FENCE_RE.match(lines[index])
            if not match or not self._opens_fence(lines, index, match):
                output.append(lines[index])
                index += 1
                continue

            prefix = match.group("prefix")
            indent = len(match.group("indent"))
            fence = match.group("fence")
            close_re = re.compile(
                r"^ *%s{%d,}[ \t]*$" % (re.escape(fence[0]), len(fence))
            )

            end, code_lines = None, []
            for number in range(index + 1, len(lines)):
                body = _strip_prefix(lines[number], prefix)
                # Leaving the quote or list item ends the search
                if body is None or (indent >= 4 and body.strip() and _indent_width(body) < indent):
                    break
                if close_re.match(body) and _indent_width(body) <= indent + 3:
                    end = number
                    break
                code_lines.append(body[min(indent, _indent_width(body)):])
            if end is None:
                raise RenderError(f"Unterminated code fence opened on line {index + 1}")

            info = match.group("info").split()
            lang = info[0] if info else ""
            code = "".join(f"{line}\n" for line in code_lines)
            placeholder = self.md.htmlStash.store(highlight_code(code, lang))

            blank = prefix.rstrip()
            following = lines[end + 1] if end + 1 < len(lines) else ""
            joined_before = bool(output) and not _is_blank(output[-1], prefix)
            joined_after = not _is_blank(following, prefix)

            if joined_before:
                output.append(blank)
            output.append(prefix + " " * indent + placeholder)
            if joined_after:
                output.append(blank)

            self.md.fence_joins[placeholder] = (joined_before, joined_after)
            index = end + 1

        return output


class FencedHighlightExtension(Extension):
    def extendMarkdown(self, md):
        md.registerExtension(self)
        md.fence_joins = {}
        # Ahead of the raw HTML block preprocessor (20)
        md.preprocessors.register(
            FencedHighlightPreprocessor(md), "fenced_highlight", priority=25
        )


def makeExtension(**kwargs):
    return FencedHighlightExtension(**kwargs)
