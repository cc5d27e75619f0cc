import math
from dataclasses import dataclass

from django.db import models
from rest_framework import serializers

from .exceptions import InvalidEffectSize
from .models import Article, Finding, Journal, Replication, Study


_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass
class StudyJsonOptions:
    """Optional sections rendered alongside a study; each flag adds one key."""
    findings: bool = False
    replications: bool = False
    replication_of: bool = False

    @classmethod
    def from_query_params(cls, params):
        def flag(name):
            return str(params.get(name, '')).strip().lower() in _TRUTHY

        return cls(
            findings=flag('findings'),
            replications=flag('replications'),
            replication_of=flag('replication_of'),
        )


class FiniteFloatField(serializers.FloatField):
    """FloatField that also refuses nan and +/-inf, which cannot be stored or rendered as JSON."""
    default_error_messages = {
        'not_finite': "A finite number is required.",
    }

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not math.isfinite(value):
            self.fail('not_finite')
        return value


class JournalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Journal
        fields = ['id', 'name', 'issn']


class ArticleSerializer(serializers.ModelSerializer):
    serializer_field_mapping = {**serializers.ModelSerializer.serializer_field_mapping,
                                models.FloatField: FiniteFloatField}
    journal = serializers.SlugRelatedField(slug_field='name', queryset=Journal.objects.all(),
                                           required=False, allow_null=True)

    class Meta:
        model = Article
        fields = [
            'id', 'doi', 'title', 'journal', 'publication_date', 'abstract',
            'repeatability', 'materials', 'quality_of_stats', 'disclosure',
            'authors_denormalized', 'created_at', 'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']


class FindingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Finding
        fields = ['id', 'name', 'url']


class ReplicationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Replication
        fields = ['id', 'study', 'replicating_study', 'closeness', 'created_at']


class EffectSizeInputSerializer(serializers.Serializer):
    test = serializers.CharField()
    value = FiniteFloatField()


class ReplicationInputSerializer(serializers.Serializer):
    replicating_study_id = serializers.IntegerField()
    closeness = FiniteFloatField(required=False, allow_null=True)


class StudySerializer(serializers.ModelSerializer):
    serializer_field_mapping = ArticleSerializer.serializer_field_mapping

    class Meta:
        model = Study
        fields = [
            'id', 'article', 'n', 'power',
            'independent_variables', 'dependent_variables', 'effect_size',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate_independent_variables(self, value):
        return self._validate_variables(value)

    def validate_dependent_variables(self, value):
        return self._validate_variables(value)

    def _validate_variables(self, value):
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise serializers.ValidationError("Expected a list of variable names.")
        return value

    def validate_effect_size(self, value):
        if not value:
            return {}
        if not isinstance(value, dict):
            raise serializers.ValidationError("Expected an object of {test: value}.")
        if len(value) > 1:
            raise serializers.ValidationError("A study can only report one effect size.")
        test, size = next(iter(value.items()))
        try:
            size = FiniteFloatField().run_validation(size)
        except serializers.ValidationError as e:
            raise serializers.ValidationError(f"Effect size for '{test}': {e.detail[0]}")
        try:
            return Study().set_effect_size(test, size).effect_size
        except InvalidEffectSize as e:
            raise serializers.ValidationError(str(e))

    def to_representation(self, instance):
        data = super().to_representation(instance)
        options = self.context.get('options') or StudyJsonOptions()

        if options.findings:
            data['findings'] = FindingSerializer(instance.findings.all(), many=True).data

        # nested studies are rendered without their own optional sections
        if options.replications:
            data['replications'] = [
                {
                    'id': replication.id,
                    'closeness': replication.closeness,
                    'replicating_study': StudySerializer(replication.replicating_study).data,
                }
                for replication in instance.replications.select_related('replicating_study')
            ]

        if options.replication_of:
            data['replication_of'] = [
                {
                    'id': replication.id,
                    'closeness': replication.closeness,
                    'study': StudySerializer(replication.study).data,
                }
                for replication in instance.replication_of.select_related('study')
            ]

        return data
