from django.apps import AppConfig


class CommentAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "CommentApp"
