from django.urls import path
from .views import CommentableCommentListView, CommentDetailView, CommentSetNonAnonymousView

urlpatterns = [
    path('<int:pk>/', CommentDetailView.as_view(), name='comment-detail'),
    path('<int:pk>/set-non-anonymous/', CommentSetNonAnonymousView.as_view(), name='comment-set-non-anonymous'),
    path('<str:commentable_type>/<int:commentable_id>/', CommentableCommentListView.as_view(), name='commentable-comments'),
]
