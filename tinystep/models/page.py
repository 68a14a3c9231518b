"""Provisioner page model."""

from pydantic import BaseModel, ConfigDict, Field

from .provisioner import Provisioner


class ProvisionersPage(BaseModel):
    """One page of ``/provisioners``.

    ``next_cursor`` is never ``None``: the server sends an empty string when
    there is no further page.
    """

    provisioners: list[Provisioner] = Field(default_factory=list)
    next_cursor: str = Field("", alias="nextCursor")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def items(self) -> list[Provisioner]:
        """Page items, for the paginators."""
        return self.provisioners

    @property
    def has_next(self) -> bool:
        return self.next_cursor != ""
