"""
Input Sanitizers

Text, email, URL and limited-HTML cleaning for submitted settings values.
"""

import re
from html.parser import HTMLParser
from html import escape
from typing import Any, Dict, List, Optional, Set, Tuple
from urllib.parse import urlsplit

from pydantic import EmailStr, TypeAdapter, ValidationError

_TAG_RE = re.compile(r"<[^>]*>")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")

ALLOWED_URL_SCHEMES = ("http", "https", "mailto")

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _to_text(value: Any) -> str:
    if value is None or isinstance(value, (list, tuple, dict, set)):
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _strip_markup(text: str) -> str:
    text = _SCRIPT_STYLE_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    text = _OCTET_RE.sub("", text)
    return _CONTROL_RE.sub("", text)


def sanitize_text_field(value: Any) -> str:
    """Single-line plain text: no tags, no line breaks, collapsed whitespace"""
    text = _strip_markup(_to_text(value))
    return _WHITESPACE_RE.sub(" ", text).strip()


def sanitize_textarea_field(value: Any) -> str:
    """Multi-line plain text: like sanitize_text_field but keeps line breaks"""
    text = _strip_markup(_to_text(value)).replace("\r\n", "\n")
    lines = [re.sub(r"[\t ]+", " ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def sanitize_email(value: Any) -> str:
    """The address if it is well formed, otherwise an empty string"""
    email = sanitize_text_field(value)
    if not email:
        return ""
    try:
        return _EMAIL_ADAPTER.validate_python(email)
    except ValidationError:
        return ""


def esc_url_raw(value: Any, schemes: Tuple[str, ...] = ALLOWED_URL_SCHEMES) -> str:
    """URL safe for storage; empty string for disallowed schemes"""
    url = re.sub(r"\s", "", _to_text(value))
    if not url:
        return ""

    scheme = urlsplit(url).scheme.lower()
    if not scheme:
        if url.startswith(("/", "#", "?")):
            return url
        # bare domain, e.g. "example.com/page"
        if re.match(r"^[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", url):
            return f"http://{url}"
        return ""

    if scheme not in schemes:
        return ""
    return url


# Tags and attributes kept by kses_post
ALLOWED_POST_TAGS: Dict[str, Set[str]] = {
    "a": {"href", "title", "target", "rel"},
    "abbr": {"title"},
    "b": set(),
    "blockquote": {"cite"},
    "br": set(),
    "code": set(),
    "em": set(),
    "h1": set(), "h2": set(), "h3": set(), "h4": set(), "h5": set(), "h6": set(),
    "i": set(),
    "img": {"src", "alt", "width", "height"},
    "li": set(),
    "ol": set(),
    "p": set(),
    "pre": set(),
    "span": set(),
    "strong": set(),
    "ul": set(),
}
GLOBAL_ATTRIBUTES = {"class", "id"}
URL_ATTRIBUTES = {"href", "src", "cite"}
VOID_TAGS = {"br", "img"}
DROP_CONTENT_TAGS = {"script", "style"}


class _PostSanitizer(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=False)
        self.parts: List[str] = []
        self._skip_depth = 0

    def _attrs(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> str:
        allowed = ALLOWED_POST_TAGS[tag] | GLOBAL_ATTRIBUTES
        rendered = []
        for name, value in attrs:
            name = name.lower()
            if name not in allowed:
                continue
            value = value or ""
            if name in URL_ATTRIBUTES:
                value = esc_url_raw(value)
                if not value:
                    continue
            rendered.append(f' {name}="{escape(value, quote=True)}"')
        return "".join(rendered)

    def handle_starttag(self, tag, attrs):
        if tag in DROP_CONTENT_TAGS:
            self._skip_depth += 1
            return
        if self._skip_depth or tag not in ALLOWED_POST_TAGS:
            return
        self.parts.append(f"<{tag}{self._attrs(tag, attrs)}>")

    def handle_startendtag(self, tag, attrs):
        if self._skip_depth or tag not in ALLOWED_POST_TAGS:
            return
        self.parts.append(f"<{tag}{self._attrs(tag, attrs)} />")

    def handle_endtag(self, tag):
        if tag in DROP_CONTENT_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        if self._skip_depth or tag not in ALLOWED_POST_TAGS or tag in VOID_TAGS:
            return
        self.parts.append(f"</{tag}>")

    def handle_data(self, data):
        if not self._skip_depth:
            self.parts.append(escape(data, quote=False))

    def handle_entityref(self, name):
        if not self._skip_depth:
            self.parts.append(f"&{name};")

    def handle_charref(self, name):
        if not self._skip_depth:
            self.parts.append(f"&#{name};")


def kses_post(value: Any) -> str:
    """Keep post-content markup from an allow-list, drop everything else"""
    parser = _PostSanitizer()
    parser.feed(_to_text(value))
    parser.close()
    return "".join(parser.parts)
