# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""
Frontmatter codec for post files.

A post file looks like this:

    ---
    title: My First Post
    date: 2024-05-01T12:34:56.000Z
    excerpt: Some words...
    tags: python, flask
    access: public
    readTime: 1
    ---

    Some words about the post.

Values are written verbatim. A value containing a newline or a `---` line
will corrupt the header; callers are expected to pass well-formed values.
"""

from typing import Any, Dict, List, Optional

DELIMITER = "---"
KEY_SEPARATOR = ": "
TAG_SEPARATOR = ", "

# Header keys, in the order they are written
FIELDS = ("title", "date", "excerpt", "tags", "access", "readTime")

def encode_tags(tags: List[str]) -> str:
    return TAG_SEPARATOR.join(tags)

def decode_tags(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return value.split(TAG_SEPARATOR)

def encode(post) -> str:
    """Serialize a post into frontmatter + body text."""
    values = {
        "title": post.title,
        "date": post.date,
        "excerpt": post.excerpt,
        "tags": encode_tags(post.tags),
        "access": post.access,
        "readTime": post.read_time,
    }
    header = "\n".join(f"{key}{KEY_SEPARATOR}{values[key]}" for key in FIELDS)
    return f"{DELIMITER}\n{header}\n{DELIMITER}\n\n{post.content}"

def split(text: str) -> Optional[tuple[str, str]]:
    """Split text into its raw header block and body.

    The header is the shortest non-empty run of text between the opening
    `---` line and the next `---` line. Returns None if the text does not
    open with a delimiter line, never closes the header, or has no body.
    """
    opening = DELIMITER + "\n"
    closing = "\n" + DELIMITER + "\n"
    if not text.startswith(opening):
        return None

    rest = text[len(opening):]
    end = rest.find(closing, 1)
    if end == -1:
        return None

    header = rest[:end]
    body = rest[end + len(closing):]
    if not body:
        return None
    return header, body

def parse_header(header: str) -> Dict[str, str]:
    """Parse `key: value` lines. Only the first separator on a line splits."""
    meta: Dict[str, str] = {}
    for line in header.split("\n"):
        key, _, value = line.partition(KEY_SEPARATOR)
        meta[key] = value
    return meta

def decode(text: str) -> Optional[Dict[str, Any]]:
    """Parse frontmatter + body text into post fields.

    Returns None when the text has no well-formed frontmatter block, so the
    caller can decide whether that is fatal or just a record to skip.
    `date` and `readTime` come back as the raw strings found in the header.
    """
    parts = split(text)
    if parts is None:
        return None

    header, body = parts
    meta = parse_header(header)
    return {
        "title": meta.get("title"),
        "excerpt": meta.get("excerpt"),
        "content": body.strip(),
        "tags": decode_tags(meta.get("tags")),
        "access": meta.get("access"),
        "date": meta.get("date"),
        "readTime": meta.get("readTime"),
    }
