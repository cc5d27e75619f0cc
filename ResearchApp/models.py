import math

from django.contrib.contenttypes.fields import GenericRelation
from django.core.exceptions import ValidationError
from django.db import models

from .exceptions import InvalidEffectSize

# statistical tests an effect size may be reported under
EFFECT_SIZE_TESTS = (
    'd', 'g', 'r', 'r_squared', 'phi', 'cramers_v',
    'eta_squared', 'partial_eta_squared', 'omega_squared',
    'f', 'f_squared', 'odds_ratio', 'risk_ratio',
)


class Journal(models.Model):
    name = models.CharField(max_length=255, unique=True)
    issn = models.CharField(max_length=20, blank=True, default='')

    def __str__(self):
        return self.name


class Article(models.Model):
    doi = models.CharField(max_length=255, unique=True)
    title = models.TextField(null=False, blank=False)
    journal = models.ForeignKey(Journal, on_delete=models.SET_NULL, null=True, blank=True, related_name='articles')
    publication_date = models.DateField(null=True, blank=True, db_index=True)
    abstract = models.TextField(null=True, blank=True)

    repeatability = models.FloatField(default=0.0)
    materials = models.FloatField(default=0.0)
    quality_of_stats = models.FloatField(default=0.0)
    disclosure = models.FloatField(default=0.0)

    authors_denormalized = models.TextField(null=True, blank=True)

    comments = GenericRelation('CommentApp.Comment', content_type_field='commentable_type',
                               object_id_field='commentable_id')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-publication_date', 'id']

    def __str__(self):
        return self.title


class Study(models.Model):
    article = models.ForeignKey(Article, on_delete=models.CASCADE, related_name='studies')
    n = models.IntegerField(null=True, blank=True)
    power = models.FloatField(null=True, blank=True)
    independent_variables = models.JSONField(default=list, blank=True)
    dependent_variables = models.JSONField(default=list, blank=True)
    effect_size = models.JSONField(default=dict, blank=True)  # {test: value}, at most one entry

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Study"
        verbose_name_plural = "Studies"
        ordering = ['id']

    def __str__(self):
        return f"Study {self.pk} of {self.article_id}"

    def clean(self):
        effect_size = self.effect_size or {}
        if len(effect_size) > 1:
            raise ValidationError({'effect_size': "A study can only report one effect size."})
        for key, value in effect_size.items():
            if key not in EFFECT_SIZE_TESTS:
                raise ValidationError({'effect_size': f"'{key}' is not a known statistical test."})
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValidationError({'effect_size': f"Effect size for '{key}' must be a finite number."})

    def add_independent_variable(self, name):
        self.independent_variables = list(self.independent_variables or []) + [name]
        return self

    def add_dependent_variable(self, name):
        self.dependent_variables = list(self.dependent_variables or []) + [name]
        return self

    def set_effect_size(self, test, value):
        """
        Replace the study's effect size with ``{test: value}``.

        Raises InvalidEffectSize for an unknown statistical test and leaves
        the current mapping as it was. Nothing is saved.
        """
        key = str(test)
        if key not in EFFECT_SIZE_TESTS:
            raise InvalidEffectSize(key)
        self.effect_size = {key: value}
        return self

    def add_replication(self, replicating_study, closeness=0):
        return Replication.objects.add_replication(self, replicating_study, closeness)

    def as_json(self, options=None):
        from .serializers import StudySerializer, StudyJsonOptions

        return StudySerializer(self, context={'options': options or StudyJsonOptions()}).data


class Finding(models.Model):
    study = models.ForeignKey(Study, on_delete=models.CASCADE, related_name='findings')
    name = models.CharField(max_length=255)
    url = models.URLField(max_length=1000)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name


class ReplicationManager(models.Manager):
    def add_replication(self, study, replicating_study, closeness=None):
        # duplicate edges and self-replication are both allowed
        return self.create(
            study=study,
            replicating_study=replicating_study,
            closeness=0 if closeness is None else closeness,
        )


class Replication(models.Model):
    study = models.ForeignKey(Study, on_delete=models.CASCADE, related_name='replications')
    replicating_study = models.ForeignKey(Study, on_delete=models.CASCADE, related_name='replication_of')
    closeness = models.FloatField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ReplicationManager()

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Study {self.replicating_study_id} replicates {self.study_id}"
