from django.urls import path
from .views import (ArticleListCreateView, ArticleDetailView, ArticleStudyListCreateView,
                    StudyDetailView, StudyVariableView, StudyEffectSizeView,
                    StudyReplicationView, StudyFindingListCreateView)

urlpatterns = [
    path('articles/', ArticleListCreateView.as_view(), name='article-list-create'),
    path('articles/<int:pk>/', ArticleDetailView.as_view(), name='article-detail'),
    path('articles/<int:article_id>/studies/', ArticleStudyListCreateView.as_view(), name='article-study-list-create'),

    path('studies/<int:pk>/', StudyDetailView.as_view(), name='study-detail'),
    path('studies/<int:pk>/variables/', StudyVariableView.as_view(), name='study-variables'),
    path('studies/<int:pk>/effect-size/', StudyEffectSizeView.as_view(), name='study-effect-size'),
    path('studies/<int:pk>/replications/', StudyReplicationView.as_view(), name='study-replications'),
    path('studies/<int:pk>/findings/', StudyFindingListCreateView.as_view(), name='study-findings'),
]
