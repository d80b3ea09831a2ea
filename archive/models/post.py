# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from typing import Any, Dict, List
from ..utility.timestamps import display_date

class Post:
    """A single archive post, as stored in one markdown file."""
    id: str
    title: str
    excerpt: str
    content: str
    tags: List[str]
    access: str
    date: str
    read_time: int | str | None  # int when created, raw header string when decoded
    filename: str | None

    def __init__(self, id, title, excerpt, content, tags, access, date, read_time, filename=None):
        self.id = id
        self.title = title
        self.excerpt = excerpt
        self.content = content
        self.tags = tags
        self.access = access
        self.date = date
        self.read_time = read_time
        self.filename = filename

    @staticmethod
    def from_decoded(post_id: str, fields: Dict[str, Any], filename: str | None = None) -> "Post":
        return Post(
            id=post_id,
            title=fields.get("title"),
            excerpt=fields.get("excerpt"),
            content=fields.get("content"),
            tags=fields.get("tags", []),
            access=fields.get("access"),
            date=fields.get("date"),
            read_time=fields.get("readTime"),
            filename=filename
        )

    def to_dict(self, include_meta: bool = False) -> Dict[str, Any]:
        """JSON representation used by the API. `meta` is the display date."""
        data = {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "tags": self.tags,
            "access": self.access,
            "date": self.date,
            "readTime": self.read_time
        }
        if include_meta:
            data["meta"] = display_date(self.date)
        return data

    def __repr__(self):
        return f"<Post id=\"{self.id}\" title=\"{self.title}\" date=\"{self.date}\" tags={len(self.tags)}>"
