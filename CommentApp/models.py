from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models


class CommentQuerySet(models.QuerySet):
    def for_target(self, target):
        return self.filter(
            commentable_type=ContentType.objects.get_for_model(target),
            commentable_id=target.pk,
        )

    def top_level(self):
        return self.filter(parent__isnull=True)


class Comment(models.Model):
    # what the comment is attached to: an Article or a User
    commentable_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    commentable_id = models.PositiveBigIntegerField()
    commentable = GenericForeignKey('commentable_type', 'commentable_id')

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='owned_comments')
    parent = models.ForeignKey('self', on_delete=models.CASCADE, null=True, blank=True, related_name='comments')

    comment = models.TextField(null=False, blank=False)
    field = models.CharField(max_length=255, null=True, blank=True)  # form field on the commentable
    anonymous = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CommentQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['commentable_type', 'commentable_id'], name='comment_commentable_idx'),
        ]

    def __str__(self):
        return f"Comment by {self.owner_id}: {self.comment[:40]}"

    def is_owned_by(self, actor):
        return actor is not None and actor.pk == self.owner_id
