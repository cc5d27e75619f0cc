from dataclasses import dataclass

from django.apps import apps
from django.conf import settings
from rest_framework.exceptions import NotFound

# URL slug -> model label of everything a comment can hang off
COMMENTABLE_MODELS = {
    'articles': 'ResearchApp.Article',
    'users': settings.AUTH_USER_MODEL,
    'comments': 'CommentApp.Comment',  # posting here creates a reply
}


@dataclass(frozen=True)
class CommentableRef:
    kind: str
    object_id: int

    @property
    def model(self):
        return apps.get_model(COMMENTABLE_MODELS[self.kind])

    def resolve(self):
        target = self.model._default_manager.filter(pk=self.object_id).first()
        if target is None:
            raise NotFound(f"No {self.kind[:-1]} with id {self.object_id}.")
        return target


def parse_commentable(kind, object_id):
    if kind not in COMMENTABLE_MODELS:
        raise NotFound(f"'{kind}' cannot be commented on.")
    try:
        object_id = int(object_id)
    except (TypeError, ValueError):
        raise NotFound(f"No {kind[:-1]} with id {object_id}.")
    return CommentableRef(kind=kind, object_id=object_id)


def commentable_kind(content_type):
    """Reverse lookup: the URL slug for a comment's content type."""
    label = f"{content_type.app_label}.{content_type.model}".lower()
    for kind, model_label in COMMENTABLE_MODELS.items():
        if model_label.lower() == label:
            return kind
    return content_type.model
