from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("AccountApp.urls")),
    path("api/", include("ResearchApp.urls")),
    path("api/comments/", include("CommentApp.urls")),
]
