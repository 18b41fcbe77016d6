"""Pydantic model for the ``candidats`` resource.

Only ``id`` is declared.  Every other attribute of a candidat is an opaque
payload field: accepted as-is, stored, and echoed back by ``model_dump``.
"""

from pydantic import BaseModel, ConfigDict


class Candidat(BaseModel):
    """A candidat record; ``id`` is ``None`` until the store assigns one."""
    model_config = ConfigDict(extra="allow")

    id: int | None = None
