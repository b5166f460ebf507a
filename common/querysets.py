from django.db.models.query import QuerySet
from django.utils import timezone


class SoftDeleteQuerySet(QuerySet):
    """
    QuerySet for models with a `deleted_at` column.

    `soft_delete()` and `restore()` are single UPDATE statements and return the
    number of affected rows. `delete()` keeps Django's semantics and removes rows.
    """

    def without_trashed(self):
        return self.filter(deleted_at__isnull=True)

    def only_trashed(self):
        return self.filter(deleted_at__isnull=False)

    def soft_delete(self, deleted_at=None) -> int:
        deleted_at = deleted_at or timezone.now()
        return self.filter(deleted_at__isnull=True).update(
            deleted_at=deleted_at, modified=deleted_at
        )

    def restore(self) -> int:
        return self.filter(deleted_at__isnull=False).update(
            deleted_at=None, modified=timezone.now()
        )
