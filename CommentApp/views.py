from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from services.comment_service import (list_comments, get_comment, create_comment,
                                      set_non_anonymous, destroy_comment)


def _actor(request):
    user = request.user
    return user if user is not None and user.is_authenticated else None


class CommentableCommentListView(APIView):
    """
    GET  /api/comments/<commentable_type>/<commentable_id>/?field=<field>
    POST /api/comments/<commentable_type>/<commentable_id>/
      {"comment": "...", "field": "optional", "anonymous": false}
    """
    # the comment service does its own actor checks
    permission_classes = [AllowAny]

    def get(self, request, commentable_type, commentable_id):
        data = list_comments(_actor(request), commentable_type, commentable_id,
                             field=request.query_params.get('field'))
        return Response(data, status=status.HTTP_200_OK)

    def post(self, request, commentable_type, commentable_id):
        data = create_comment(_actor(request), commentable_type, commentable_id, request.data)
        return Response(data, status=status.HTTP_201_CREATED)


class CommentDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, pk):
        return Response(get_comment(_actor(request), pk), status=status.HTTP_200_OK)

    def delete(self, request, pk):
        destroy_comment(_actor(request), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CommentSetNonAnonymousView(APIView):
    permission_classes = [AllowAny]

    def post(self, request, pk):
        return Response(set_non_anonymous(_actor(request), pk), status=status.HTTP_200_OK)
