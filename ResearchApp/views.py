import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework import generics
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidEffectSize
from .models import Article, Finding, Replication, Study
from .serializers import (ArticleSerializer, EffectSizeInputSerializer, FindingSerializer,
                          ReplicationInputSerializer, ReplicationSerializer,
                          StudyJsonOptions, StudySerializer)

logger = logging.getLogger(__name__)


class ArticleListCreateView(generics.ListCreateAPIView):
    serializer_class = ArticleSerializer

    def get_queryset(self):
        queryset = Article.objects.select_related('journal')

        doi = self.request.GET.get('doi')
        title = self.request.GET.get('title')

        search_query = Q()
        if doi:
            search_query &= Q(doi=doi)
        # Title filtering searches both title and abstract
        if title:
            search_query &= (Q(title__icontains=title) | Q(abstract__icontains=title))

        return queryset.filter(search_query)


class ArticleDetailView(generics.RetrieveUpdateDestroyAPIView):
    queryset = Article.objects.select_related('journal')
    serializer_class = ArticleSerializer


class ArticleStudyListCreateView(generics.ListCreateAPIView):
    serializer_class = StudySerializer

    def get_article(self):
        return get_object_or_404(Article, pk=self.kwargs['article_id'])

    def get_queryset(self):
        return Study.objects.filter(article=self.get_article())

    def create(self, request, *args, **kwargs):
        article = self.get_article()
        data = request.data.copy()
        data['article'] = article.pk

        serializer = self.get_serializer(data=data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class StudyDetailView(generics.RetrieveUpdateDestroyAPIView):
    queryset = Study.objects.all()
    serializer_class = StudySerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['options'] = StudyJsonOptions.from_query_params(self.request.query_params)
        return context


class StudyVariableView(APIView):
    """
    POST /api/studies/<pk>/variables/
    Body: {"kind": "independent" | "dependent", "name": "reaction time"}
    """

    def post(self, request, pk):
        study = get_object_or_404(Study, pk=pk)
        kind = request.data.get('kind')
        name = (request.data.get('name') or '').strip()

        if not name:
            return Response({"error": "Variable name is required"}, status=status.HTTP_400_BAD_REQUEST)

        if kind == 'independent':
            study.add_independent_variable(name)
        elif kind == 'dependent':
            study.add_dependent_variable(name)
        else:
            return Response({"error": "kind must be 'independent' or 'dependent'"},
                            status=status.HTTP_400_BAD_REQUEST)

        study.save(update_fields=[f'{kind}_variables', 'updated_at'])
        return Response(StudySerializer(study).data, status=status.HTTP_200_OK)


class StudyEffectSizeView(APIView):
    """
    POST /api/studies/<pk>/effect-size/
    Body: {"test": "d", "value": 0.3}  -- replaces any effect size already reported
    """

    def post(self, request, pk):
        study = get_object_or_404(Study, pk=pk)

        ser = EffectSizeInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            study.set_effect_size(ser.validated_data['test'], ser.validated_data['value'])
        except InvalidEffectSize as e:
            logger.warning(f"Rejected effect size for study {study.id}: {e}")
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        study.save(update_fields=['effect_size', 'updated_at'])
        return Response(StudySerializer(study).data, status=status.HTTP_200_OK)


class StudyReplicationView(APIView):
    """
    POST /api/studies/<pk>/replications/
    Body: {"replicating_study_id": 12, "closeness": 3}  -- closeness defaults to 0
    """

    def post(self, request, pk):
        study = get_object_or_404(Study, pk=pk)

        # validate everything before the edge is written
        ser = ReplicationInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        replicating_study = get_object_or_404(Study, pk=ser.validated_data['replicating_study_id'])

        replication = Replication.objects.add_replication(study, replicating_study,
                                                          ser.validated_data.get('closeness'))
        return Response(ReplicationSerializer(replication).data, status=status.HTTP_201_CREATED)


class StudyFindingListCreateView(generics.ListCreateAPIView):
    serializer_class = FindingSerializer

    def get_study(self):
        return get_object_or_404(Study, pk=self.kwargs['pk'])

    def get_queryset(self):
        return Finding.objects.filter(study=self.get_study())

    def perform_create(self, serializer):
        serializer.save(study=self.get_study())
