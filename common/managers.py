from django.db.models import Manager

from common.querysets import SoftDeleteQuerySet


class SoftDeleteManager(Manager):
    """
    Manager for soft-deletable models. Trashed rows are hidden unless the
    manager is built with `include_trashed=True`.
    Subclasses point `queryset_class` at their own SoftDeleteQuerySet subclass.
    """

    queryset_class: type[SoftDeleteQuerySet] = SoftDeleteQuerySet

    def __init__(self, *args, include_trashed: bool = False, **kwargs):
        self.include_trashed = include_trashed
        super().__init__(*args, **kwargs)

    def _unfiltered_queryset(self) -> SoftDeleteQuerySet:
        return self.queryset_class(self.model, using=self._db)

    def get_queryset(self) -> SoftDeleteQuerySet:
        queryset = self._unfiltered_queryset()
        if self.include_trashed:
            return queryset
        return queryset.without_trashed()

    def with_trashed(self):
        return self._unfiltered_queryset()

    def only_trashed(self):
        return self._unfiltered_queryset().only_trashed()

    def without_trashed(self):
        return self._unfiltered_queryset().without_trashed()
