"""
Sanitization of user-supplied text before it is stored or returned.

Two policies exist because fields carry two kinds of text:

``escape_markup``
    For plain-text fields (titles, names).  Angle brackets are replaced by
    their entities over the whole value, so any markup renders literally.
``filter_markup``
    For body fields that may carry a limited set of formatting tags.  The
    value is run through ``nh3`` (ammonia): allow-listed tags survive,
    attributes outside the per-tag allow-list (every ``on*`` event handler
    among them) are dropped.  ``<script>`` and ``<style>`` tags are escaped
    first, so they and their contents render as literal text.

Both policies are idempotent, so rows that were sanitized on the way in can
safely be sanitized again on the way out.
"""
import re
from typing import Callable, Mapping

import nh3

Policy = Callable[[str], str]

_RAW_TEXT_TAG_RE = re.compile(r"<\s*/?\s*(?:script|style)\b[^>]*>", re.IGNORECASE)


def escape_markup(text: str) -> str:
    """Render every ``<`` and ``>`` in *text* as a literal character."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def filter_markup(text: str) -> str:
    """Strip unsafe tags and attributes from *text*, keeping safe markup."""
    text = _RAW_TEXT_TAG_RE.sub(lambda m: escape_markup(m.group(0)), text)
    return nh3.clean(text)


ARTICLE_POLICIES: Mapping[str, Policy] = {
    "title": escape_markup,
    "content": filter_markup,
}

COMMENT_POLICIES: Mapping[str, Policy] = {
    "content": filter_markup,
}

USER_POLICIES: Mapping[str, Policy] = {
    "fullname": escape_markup,
    "username": escape_markup,
    "nickname": escape_markup,
}


def sanitize_fields(data: dict, policies: Mapping[str, Policy]) -> dict:
    """
    Return a copy of *data* with each policy applied to its field.

    Fields that are absent, ``None`` or not strings are copied unchanged.
    """
    cleaned = dict(data)
    for field, policy in policies.items():
        value = cleaned.get(field)
        if isinstance(value, str):
            cleaned[field] = policy(value)
    return cleaned


def sanitize_article(data: dict) -> dict:
    return sanitize_fields(data, ARTICLE_POLICIES)


def sanitize_comment(data: dict) -> dict:
    return sanitize_fields(data, COMMENT_POLICIES)


def sanitize_user(data: dict) -> dict:
    return sanitize_fields(data, USER_POLICIES)
