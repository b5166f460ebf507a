from django.db import models

from common.models import BaseModel
from organizations.managers import BaseOrganizationModelManager


class Organization(BaseModel):
    """
    Represents a team (tenant). Every business record belongs to exactly one.
    """

    name = models.CharField(max_length=255)

    def __str__(self):
        return self.name


class OrganizationModel(BaseModel):
    """
    Represents a model that is associated with an organization.
    """

    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="+",
        help_text="The organization this model is associated with. Queries should use the `organization` field.",
    )

    objects: BaseOrganizationModelManager = BaseOrganizationModelManager()

    class Meta:
        abstract = True
