# services/comment_service.py
"""
Comment threads on articles and users.

Every operation takes the resolved ``actor`` (a User, or None when the
request is unauthenticated) explicitly; nothing here reads request state.
Authorization is checked before anything is written.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import transaction
from rest_framework.exceptions import NotFound

from CommentApp.commentables import parse_commentable
from CommentApp.exceptions import Unauthorized
from CommentApp.models import Comment
from CommentApp.serializers import CommentCreateSerializer, CommentSerializer, ThreadedCommentSerializer

logger = logging.getLogger(__name__)


def _require_actor(actor):
    if actor is None:
        raise Unauthorized("Authentication credentials were not provided.")


def _is_admin(actor) -> bool:
    return bool(getattr(actor, 'admin', False) or getattr(actor, 'is_superuser', False))


def _threaded(queryset):
    return queryset.select_related('owner', 'commentable_type').prefetch_related(
        'comments__owner', 'comments__commentable_type'
    )


def _render(comments, actor, many=False):
    return ThreadedCommentSerializer(comments, many=many, context={'actor': actor}).data


def list_comments(actor, commentable_type: str, commentable_id, field: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Comments for a commentable, newest first, replies nested one level.

    ``users`` lists every comment the user wrote, replies included, flat;
    ``comments`` lists the replies to one comment; anything else lists the
    top-level comments attached to the target.
    """
    ref = parse_commentable(commentable_type, commentable_id)
    target = ref.resolve()

    if ref.kind == 'users':
        # replies are rows of their own here, so nesting them would list them twice
        queryset = Comment.objects.filter(owner=target)
        if field:
            queryset = queryset.filter(field=field)
        queryset = queryset.select_related('owner', 'commentable_type')
        return CommentSerializer(queryset, many=True, context={'actor': actor}).data
    elif ref.kind == 'comments':
        queryset = target.comments.all()
    else:
        queryset = Comment.objects.for_target(target).top_level()

    if field:
        queryset = queryset.filter(field=field)

    return _render(_threaded(queryset), actor, many=True)


def get_comment(actor, comment_id) -> Dict[str, Any]:
    comment = _threaded(Comment.objects.filter(pk=comment_id)).first()
    if comment is None:
        raise NotFound("Comment not found.")
    return _render(comment, actor)


@transaction.atomic
def create_comment(actor, commentable_type: str, commentable_id, data) -> Dict[str, Any]:
    _require_actor(actor)

    ref = parse_commentable(commentable_type, commentable_id)
    target = ref.resolve()

    # missing or blank text is a 400 with a message on `comment`
    ser = CommentCreateSerializer(data=data)
    ser.is_valid(raise_exception=True)

    parent = None
    if ref.kind == 'comments':
        # a reply stays on its parent's thread
        parent = target
        target = parent.commentable

    comment = Comment.objects.create(
        owner=actor,
        commentable=target,
        parent=parent,
        **ser.validated_data,
    )
    logger.info(f"User {actor.pk} commented on {commentable_type} {commentable_id} (comment {comment.pk})")
    return _render(comment, actor)


def set_non_anonymous(actor, comment_id) -> Dict[str, Any]:
    _require_actor(actor)

    # only the owner may reveal themselves; for anyone else the comment does not exist
    comment = Comment.objects.filter(pk=comment_id, owner=actor).first()
    if comment is None:
        raise NotFound("Comment not found.")

    comment.anonymous = False
    comment.save(update_fields=['anonymous', 'updated_at'])
    logger.info(f"User {actor.pk} unanonymized comment {comment.pk}")
    return _render(comment, actor)


def destroy_comment(actor, comment_id) -> None:
    _require_actor(actor)

    comment = Comment.objects.filter(pk=comment_id).first()
    if comment is None:
        raise NotFound("Comment not found.")

    if not (comment.is_owned_by(actor) or _is_admin(actor)):
        logger.warning(f"User {actor.pk} denied deleting comment {comment.pk} owned by {comment.owner_id}")
        raise Unauthorized("Only the owner or an admin can delete this comment.")

    comment.delete()  # replies go with it
    logger.info(f"User {actor.pk} deleted comment {comment_id}")
