# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, jsonify, request
from ..errors import ValidationError, PostNotFoundError, StorageError
from ..repository import PostRepository
from ..discord import DiscordNotifier
import logging

logger = logging.getLogger(__name__)
posts_bp = Blueprint('posts', __name__)

def get_repository() -> PostRepository:
    return current_app.extensions['archive.repository']

def get_notifier() -> DiscordNotifier:
    return current_app.extensions['archive.discord']

# POST /api/posts
@posts_bp.route('/posts', methods=['POST'])
def create_post():
    data = request.get_json(silent=True)
    try:
        post = get_repository().create(data)
    except ValidationError as e:
        logger.warning(f"Rejected post: {e.message}")
        return jsonify({'error': e.message}), 400
    except StorageError as e:
        logger.error(f"Error saving post: {e.message}", exc_info=True)
        get_notifier().send_error_notification("Post Repository", e, context="Saving a new post")
        return jsonify({'error': 'Failed to save post'}), 500

    get_notifier().post_published(post)
    return jsonify({
        'success': True,
        'filename': post.filename,
        'message': 'Post published'
    })

# GET /api/posts
@posts_bp.route('/posts', methods=['GET'])
def list_posts():
    try:
        posts = get_repository().list()
    except StorageError as e:
        logger.error(f"Error reading posts: {e.message}", exc_info=True)
        return jsonify({'error': 'Failed to read posts'}), 500

    logger.debug(f"Listing {len(posts)} posts")
    return jsonify([post.to_dict(include_meta=True) for post in posts])

# GET /api/posts/<id>
@posts_bp.route('/posts/<post_id>', methods=['GET'])
def get_post(post_id):
    try:
        post = get_repository().get(post_id)
    except PostNotFoundError as e:
        logger.warning(f"Error reading post: {e.message}")
        return jsonify({'error': 'Post not found'}), 404

    return jsonify(post.to_dict())

# DELETE /api/posts/<id>
@posts_bp.route('/posts/<post_id>', methods=['DELETE'])
def delete_post(post_id):
    try:
        get_repository().delete(post_id)
    except StorageError as e:
        # A missing post lands here too; deletes are not idempotent
        logger.error(f"Error deleting post: {e.message}")
        return jsonify({'error': 'Failed to delete post'}), 500

    get_notifier().post_deleted(post_id)
    return jsonify({'success': True, 'message': 'Post deleted'})
