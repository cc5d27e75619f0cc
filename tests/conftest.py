import pytest
from rest_framework.test import APIClient

from AccountApp.models import User
from CommentApp.models import Comment
from ResearchApp.models import Article, Study


@pytest.fixture
def user(db):
    return User.objects.create_user(username='bentron', email='ben@example.com', name='bentron', curator=True)


@pytest.fixture
def admin_actor(db):
    return User.objects.create_user(username='ben', email='ben+admin@example.com', name='ben', admin=True)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_as():
    """Build an APIClient acting as the given user (None for anonymous)."""
    def _client_as(actor):
        client = APIClient()
        if actor is not None:
            client.force_authenticate(user=actor)
        return client
    return _client_as


@pytest.fixture
def article(db):
    return Article.objects.create(
        title='Z Article',
        doi='http://dx.doi.org/10.6084/m9.figshare.949676',
        abstract='hello world',
    )


@pytest.fixture
def study(article):
    return Study.objects.create(article=article, n=0, power=0)


@pytest.fixture
def replicating_study(article):
    return Study.objects.create(article=article, n=0, power=0)


@pytest.fixture
def thread(user, admin_actor):
    """
    An article with three top-level comments (one anonymous) and one reply:

        Admin comment      (admin)
        Bar                (user, anonymous)
        Foo                (user, field=fooField)
          Nested comment   (user)
    """
    article = Article.objects.create(doi='123banana', title='hello world')
    foo = Comment.objects.create(commentable=article, owner=user, comment='Foo', field='fooField')
    bar = Comment.objects.create(commentable=article, owner=user, comment='Bar', anonymous=True)
    admin_comment = Comment.objects.create(commentable=article, owner=admin_actor, comment='Admin comment')
    nested = Comment.objects.create(commentable=article, parent=foo, owner=user, comment='Nested comment')
    return {
        'article': article,
        'foo': foo,
        'bar': bar,
        'admin_comment': admin_comment,
        'nested': nested,
    }
