from django.contrib import admin
from .models import Article, Journal, Study, Finding, Replication


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ('doi', 'title', 'publication_date')
    search_fields = ('doi', 'title')


@admin.register(Replication)
class ReplicationAdmin(admin.ModelAdmin):
    list_display = ('study', 'replicating_study', 'closeness')


admin.site.register(Journal)
admin.site.register(Study)
admin.site.register(Finding)
