from django.contrib import admin
from .models import Comment


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('id', 'owner', 'commentable_type', 'commentable_id', 'field', 'anonymous', 'created_at')
    list_filter = ('anonymous', 'commentable_type')
    search_fields = ('comment',)
