import pytest
from django.core.exceptions import ValidationError

from ResearchApp.exceptions import InvalidEffectSize
from ResearchApp.models import Replication, Study
from ResearchApp.serializers import StudyJsonOptions, StudySerializer


pytestmark = pytest.mark.django_db


def test_study_requires_an_article():
    study = Study(n=0, power=0)
    with pytest.raises(ValidationError) as excinfo:
        study.full_clean()
    assert list(excinfo.value.error_dict) == ['article']
    assert len(excinfo.value.error_dict['article']) == 1


def test_study_serializer_rejects_missing_article():
    ser = StudySerializer(data={'n': 0, 'power': 0})
    assert not ser.is_valid()
    assert list(ser.errors) == ['article']


def test_variables_and_effect_size_start_empty(study):
    study.refresh_from_db()
    assert study.independent_variables == []
    assert study.dependent_variables == []
    assert study.effect_size == {}


def test_explicit_none_collections_are_materialized(article):
    study = Study.objects.create(article=article, independent_variables=None,
                                 dependent_variables=None, effect_size=None)
    study.refresh_from_db()
    assert study.independent_variables == []
    assert study.dependent_variables == []
    assert study.effect_size == {}


def test_added_variables_are_persisted(study):
    study.add_dependent_variable('reaction time').save()
    study.add_independent_variable('thc').add_independent_variable('thc').save()
    study.refresh_from_db()
    assert study.dependent_variables == ['reaction time']
    assert study.independent_variables == ['thc', 'thc']


def test_unknown_statistical_test_is_rejected(study):
    study.set_effect_size('d', 0.5)
    with pytest.raises(InvalidEffectSize):
        study.set_effect_size('banana', 0.3)
    assert study.effect_size == {'d': 0.5}


def test_known_statistical_test_is_persisted(study):
    study.set_effect_size('d', 0.3).save()
    study.refresh_from_db()
    assert study.effect_size['d'] == 0.3


def test_only_one_effect_size_per_study(study):
    study.set_effect_size('d', 0.3)
    study.set_effect_size('r', 0.3)
    study.save()
    study.refresh_from_db()
    assert study.effect_size == {'r': 0.3}


def test_clean_rejects_more_than_one_effect_size(study):
    study.effect_size = {'d': 0.3, 'r': 0.1}
    with pytest.raises(ValidationError):
        study.full_clean()


def test_study_looks_up_its_article(study, article):
    assert study.article == article


def test_findings_are_created_for_a_study(study):
    study.findings.create(name='findings.txt', url='https://www.example.com/')
    study.findings.create(name='findings2.txt', url='https://www.example2.com/')

    assert study.findings.count() == 2
    finding = study.findings.first()
    assert finding.name == 'findings.txt'
    assert finding.url == 'https://www.example.com/'


def test_as_json_includes_findings_only_when_asked(study):
    study.findings.create(name='findings.txt', url='https://www.example.com/')

    assert len(study.as_json(StudyJsonOptions(findings=True))['findings']) == 1
    assert 'findings' not in study.as_json()


def test_as_json_renders_replicating_studies(study, replicating_study):
    study.add_replication(replicating_study, 3)

    study_json = study.as_json(StudyJsonOptions(replications=True))
    assert len(study_json['replications']) == 1
    assert study_json['replications'][0]['replicating_study']['id'] == replicating_study.id
    assert study_json['replications'][0]['closeness'] == 3
    assert 'replication_of' not in study_json


def test_as_json_renders_studies_replicated(study, replicating_study):
    study.add_replication(replicating_study, 3)

    study_json = replicating_study.as_json(StudyJsonOptions(replication_of=True))
    assert len(study_json['replication_of']) == 1
    assert study_json['replication_of'][0]['study']['id'] == study.id


def test_replication_without_closeness_defaults_to_zero(study, replicating_study):
    Replication.objects.add_replication(study, replicating_study)

    assert study.replications.count() == 1
    replication = study.replications.first()
    assert replication.study == study
    assert replication.replicating_study == replicating_study
    assert replication.closeness == 0


def test_replication_with_closeness(study, replicating_study):
    study.add_replication(replicating_study, 33)
    assert study.replications.first().closeness == 33


def test_duplicate_and_self_replications_are_allowed(study, replicating_study):
    study.add_replication(replicating_study)
    study.add_replication(replicating_study)
    study.add_replication(study)

    assert study.replications.count() == 3
    assert study.replication_of.count() == 1


@pytest.mark.parametrize('value', ['huge', float('nan'), float('inf'), True])
def test_clean_rejects_non_numeric_effect_size(study, value):
    study.effect_size = {'d': value}
    with pytest.raises(ValidationError) as excinfo:
        study.full_clean()
    assert list(excinfo.value.error_dict) == ['effect_size']
