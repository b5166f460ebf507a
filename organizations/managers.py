from django.db.models import Manager

from common.exceptions import OrganizationRequiredError
from organizations.querysets import BaseOrganizationModelQuerySet


class BaseOrganizationModelManager(Manager):
    """
    Base manager for models that belong to an organization.
    This manager can be extended by other organization models.
    """

    def get_queryset(self):
        return BaseOrganizationModelQuerySet(self.model, using=self._db)

    def filter_by_organization(self, organization_id: int):
        """
        Filters the queryset by the specified organization ID.
        :param organization_id: ID of the organization to filter by.
        :return: Filtered queryset.
        """
        return self.get_queryset().filter_by_organization(organization_id)

    def exclude_by_organization(self, organization_id: int):
        """
        Excludes the queryset by the specified organization ID.
        :param organization_id: ID of the organization to exclude.
        :return: Filtered queryset excluding the specified organization.
        """
        return self.get_queryset().exclude_by_organization(organization_id)

    def create(self, **kwargs):
        """
        Override the create method to ensure every row belongs to an organization.
        """
        if "organization_id" not in kwargs and "organization" not in kwargs:
            raise OrganizationRequiredError()
        return super().create(**kwargs)
