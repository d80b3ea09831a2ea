# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

class ArchiveError(Exception):
    """Base class for errors raised by the post repository."""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(ArchiveError):
    """Required input was missing or malformed."""
    status_code = 400

class PostNotFoundError(ArchiveError):
    """No decodable post exists for the requested id."""
    status_code = 404

    def __init__(self, post_id: str):
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id

class StorageError(ArchiveError):
    """The backing store failed to read, write or remove a post."""
    status_code = 500
