from rest_framework import serializers

from .commentables import commentable_kind
from .models import Comment


class CommentSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(source='owner.name', read_only=True)
    commentable_type = serializers.SerializerMethodField()
    commentable_id = serializers.IntegerField(read_only=True)
    parent_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = [
            'id', 'comment', 'field', 'anonymous', 'owner_id', 'name',
            'commentable_type', 'commentable_id', 'parent_id',
            'created_at', 'updated_at',
        ]

    def get_commentable_type(self, obj):
        return commentable_kind(obj.commentable_type)

    def to_representation(self, instance):
        data = super().to_representation(instance)

        # anonymous comments only reveal their author to that author
        if instance.anonymous and not instance.is_owned_by(self.context.get('actor')):
            data['owner_id'] = None
            data['name'] = None
        return data


class ThreadedCommentSerializer(CommentSerializer):
    """A comment with its direct replies under ``comments``."""
    comments = serializers.SerializerMethodField()

    class Meta(CommentSerializer.Meta):
        fields = CommentSerializer.Meta.fields + ['comments']

    def get_comments(self, obj):
        return CommentSerializer(obj.comments.all(), many=True, context=self.context).data


class CommentCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Comment
        fields = ['comment', 'field', 'anonymous']
