# signal.py
import logging

from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver
from .models import Study, Replication

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Study)
def _materialize_study_collections(sender, instance, **kwargs):
    # variables and effect size are never stored as NULL
    if instance.independent_variables is None:
        instance.independent_variables = []
    if instance.dependent_variables is None:
        instance.dependent_variables = []
    if instance.effect_size is None:
        instance.effect_size = {}


@receiver(post_save, sender=Replication)
def _log_replication(sender, instance, created, **kwargs):
    if created:
        logger.info(
            f"Study {instance.replicating_study_id} recorded as replication of "
            f"study {instance.study_id} (closeness={instance.closeness})"
        )
