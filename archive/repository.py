# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from datetime import datetime
from logging import getLogger
from typing import Any, Callable, Dict, List
import math
import re

from . import frontmatter
from .errors import ValidationError, PostNotFoundError, StorageError
from .models.post import Post
from .storage import PostStore
from .utility.timestamps import format_timestamp, sort_key, utcnow

logger = getLogger(__name__)

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 200
EXCERPT_SUFFIX = "..."

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")

def slugify(title: str) -> str:
    """`"Hello, World!"` -> `"hello-world"`."""
    return _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")

def count_words(text: str) -> int:
    return len(text.split())

def compute_read_time(content: str) -> int:
    """Minutes to read `content`, never less than one."""
    return max(1, math.ceil(count_words(content) / WORDS_PER_MINUTE))

def default_excerpt(content: str) -> str:
    return content[:EXCERPT_LENGTH] + EXCERPT_SUFFIX

def derive_filename(title: str, created: datetime, extension: str = ".md") -> str:
    """`<YYYY-MM-DD>-<slug><extension>` for a post created at `created`."""
    return f"{format_timestamp(created)[:10]}-{slugify(title)}{extension}"

class PostRepository:
    """Create, list, fetch and delete posts kept in a PostStore.

    There is no locking: two creates deriving the same filename race and
    the last write wins.
    """

    def __init__(self, store: PostStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def filename_for(self, post_id: str) -> str:
        return f"{post_id}{self.store.extension}"

    def id_for(self, filename: str) -> str:
        return filename[:-len(self.store.extension)] if self.store.extension else filename

    def create(self, fields: Dict[str, Any]) -> Post:
        if not isinstance(fields, dict):
            raise ValidationError("Title and content required")

        title = fields.get("title")
        content = fields.get("content")
        if not title or not content or not isinstance(title, str) or not isinstance(content, str):
            raise ValidationError("Title and content required")

        tags = fields.get("tags")
        if tags is None:
            tags = []
        elif not isinstance(tags, list):
            raise ValidationError("Tags must be a list")

        created = self.clock()
        filename = derive_filename(title, created, self.store.extension)
        access = fields.get("access")
        post = Post(
            id=self.id_for(filename),
            title=title,
            excerpt=fields.get("excerpt") or default_excerpt(content),
            content=content,
            tags=[str(tag) for tag in tags],
            access="" if access is None else str(access),
            date=format_timestamp(created),
            read_time=compute_read_time(content),
            filename=filename
        )

        try:
            self.store.write(filename, frontmatter.encode(post))
        except OSError as e:
            raise StorageError(f"Failed to write {filename}: {e}") from e

        logger.info(f"Published post {filename} ({post.read_time} min read)")
        return post

    def list(self) -> List[Post]:
        """Every decodable post, newest first. Undecodable files are skipped."""
        try:
            names = self.store.list_names()
        except OSError as e:
            raise StorageError(f"Failed to list posts: {e}") from e

        posts = []
        for filename in names:
            try:
                text = self.store.read(filename)
            except OSError as e:
                raise StorageError(f"Failed to read {filename}: {e}") from e

            fields = frontmatter.decode(text)
            if fields is None:
                logger.debug(f"Skipping {filename}: no frontmatter")
                continue
            posts.append(Post.from_decoded(self.id_for(filename), fields, filename))

        posts.sort(key=lambda post: sort_key(post.date), reverse=True)
        return posts

    def get(self, post_id: str) -> Post:
        filename = self.filename_for(post_id)
        try:
            text = self.store.read(filename)
        except OSError as e:
            logger.debug(f"Could not read {filename}: {e}")
            raise PostNotFoundError(post_id) from e

        fields = frontmatter.decode(text)
        if fields is None:
            raise PostNotFoundError(post_id)
        return Post.from_decoded(post_id, fields, filename)

    def delete(self, post_id: str) -> None:
        filename = self.filename_for(post_id)
        try:
            self.store.delete(filename)
        except OSError as e:
            raise StorageError(f"Failed to delete {filename}: {e}") from e
        logger.info(f"Deleted post {filename}")
