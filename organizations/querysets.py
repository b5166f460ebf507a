from django.db.models.query import QuerySet

from common.exceptions import OrganizationChangeNotAllowedError


class BaseOrganizationModelQuerySet(QuerySet):
    """
    Base QuerySet for organization models that need to filter by organization.
    """

    def filter_by_organization(self, organization_id: int):
        """
        Filters the queryset by the specified organization ID.
        :param organization_id: ID of the organization to filter by.
        :return: Filtered QuerySet.
        """
        return self.filter(organization_id=organization_id)

    def exclude_by_organization(self, organization_id: int):
        """
        Excludes records belonging to the specified organization ID.
        :param organization_id: ID of the organization to exclude.
        :return: Filtered QuerySet.
        """
        return self.exclude(organization_id=organization_id)

    def update(self, **kwargs):
        if "organization_id" in kwargs or "organization" in kwargs:
            raise OrganizationChangeNotAllowedError()
        return super().update(**kwargs)
