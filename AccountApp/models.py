from django.contrib.auth.models import AbstractUser
from django.contrib.contenttypes.fields import GenericRelation
from django.db import models


class User(AbstractUser):
    name = models.CharField(max_length=255, blank=True, default='')
    admin = models.BooleanField(default=False)
    curator = models.BooleanField(default=False)

    # comments left *on* this user's profile; comments written by the user are `owned_comments`
    comments = GenericRelation('CommentApp.Comment', content_type_field='commentable_type',
                               object_id_field='commentable_id')

    def __str__(self):
        return self.name or self.username
