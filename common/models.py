from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from model_utils.fields import AutoCreatedField, AutoLastModifiedField

from common.managers import SoftDeleteManager


class IndexedTimeStampedModel(models.Model):
    created = AutoCreatedField(_("created"), db_index=True)
    modified = AutoLastModifiedField(_("modified"), db_index=True)

    class Meta:
        abstract = True


class MetaJsonFieldModel(models.Model):
    meta = models.JSONField(_("meta"), default=dict, blank=True)

    class Meta:
        abstract = True


class BaseModel(IndexedTimeStampedModel, MetaJsonFieldModel):
    class Meta(IndexedTimeStampedModel.Meta, MetaJsonFieldModel.Meta):
        abstract = True


class SoftDeleteModel(models.Model):
    """
    Marks rows as deleted through `deleted_at` instead of removing them.

    `objects` hides trashed rows, `all_objects` sees everything. `force_delete()`
    removes the row for good.
    """

    deleted_at = models.DateTimeField(_("deleted at"), null=True, blank=True, db_index=True)

    objects: SoftDeleteManager = SoftDeleteManager()
    all_objects: SoftDeleteManager = SoftDeleteManager(include_trashed=True)

    class Meta:
        abstract = True

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "modified"])

    def restore(self) -> None:
        self.deleted_at = None
        self.save(update_fields=["deleted_at", "modified"])

    def force_delete(self, *args, **kwargs):
        return super().delete(*args, **kwargs)
