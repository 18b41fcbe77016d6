"""REST endpoints for managing candidats.

POST   /api/candidats        -- create (400 if the payload already has an id)
PUT    /api/candidats        -- update (falls back to create when no id)
GET    /api/candidats        -- list all
GET    /api/candidats/{id}   -- get one (404 if absent)
DELETE /api/candidats/{id}   -- delete

Each handler makes at most one store call.  ``CandidatEndpoint`` receives
its store through the constructor; ``build_router`` exposes an endpoint
instance as a FastAPI router.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from starlette.responses import JSONResponse, Response

from app.core.constants import (
    CANDIDAT_ENTITY_NAME,
    CANDIDAT_RESOURCE_PATH,
    ERROR_ID_EXISTS,
)
from app.core.errors import InvalidRequestError
from app.core.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from app.db.store import CandidatStore
from app.models.candidat import Candidat

logger = logging.getLogger(__name__)


class CandidatEndpoint:
    """Maps candidat CRUD requests onto a ``CandidatStore``."""

    def __init__(self, store: CandidatStore) -> None:
        self.store = store

    def create(self, candidat: Candidat) -> JSONResponse:
        """Persist a new candidat.

        Returns 201 with the stored candidat, a ``Location`` header and a
        creation alert.  Raises ``InvalidRequestError`` if the payload
        already carries an id.
        """
        logger.debug("REST request to save Candidat : %s", candidat)
        if candidat.id is not None:
            raise InvalidRequestError(
                CANDIDAT_ENTITY_NAME,
                ERROR_ID_EXISTS,
                "A new candidat cannot already have an ID",
            )
        result = self.store.save(candidat)
        headers = create_entity_creation_alert(CANDIDAT_ENTITY_NAME, str(result.id))
        headers["Location"] = f"{CANDIDAT_RESOURCE_PATH}/{result.id}"
        return JSONResponse(
            status_code=201,
            content=result.model_dump(mode="json"),
            headers=headers,
        )

    def update(self, candidat: Candidat) -> JSONResponse:
        """Save an existing candidat, or create it when it has no id yet."""
        logger.debug("REST request to update Candidat : %s", candidat)
        if candidat.id is None:
            return self.create(candidat)
        result = self.store.save(candidat)
        return JSONResponse(
            status_code=200,
            content=result.model_dump(mode="json"),
            headers=create_entity_update_alert(CANDIDAT_ENTITY_NAME, str(candidat.id)),
        )

    def list_all(self) -> JSONResponse:
        logger.debug("REST request to get all Candidats")
        candidats = self.store.find_all()
        return JSONResponse(
            status_code=200,
            content=[c.model_dump(mode="json") for c in candidats],
        )

    def get_by_id(self, candidat_id: int) -> Response:
        """Return the candidat, or 404 with an empty body when absent."""
        logger.debug("REST request to get Candidat : %s", candidat_id)
        candidat = self.store.find_one(candidat_id)
        if candidat is None:
            return Response(status_code=404)
        return JSONResponse(status_code=200, content=candidat.model_dump(mode="json"))

    def delete_by_id(self, candidat_id: int) -> Response:
        logger.debug("REST request to delete Candidat : %s", candidat_id)
        self.store.delete(candidat_id)
        return Response(
            status_code=200,
            headers=create_entity_deletion_alert(CANDIDAT_ENTITY_NAME, str(candidat_id)),
        )


def build_router(endpoint: CandidatEndpoint) -> APIRouter:
    """Return a router exposing *endpoint* under ``/candidats``.

    Mount it with ``prefix=API_PREFIX``.
    """
    router = APIRouter()

    @router.post("/candidats", status_code=201, response_model=Candidat)
    def create_candidat(candidat: Candidat) -> Response:
        return endpoint.create(candidat)

    @router.put("/candidats", response_model=Candidat)
    def update_candidat(candidat: Candidat) -> Response:
        return endpoint.update(candidat)

    @router.get("/candidats", response_model=list[Candidat])
    def get_all_candidats() -> Response:
        return endpoint.list_all()

    @router.get("/candidats/{candidat_id}", response_model=Candidat)
    def get_candidat(candidat_id: int) -> Response:
        return endpoint.get_by_id(candidat_id)

    @router.delete("/candidats/{candidat_id}")
    def delete_candidat(candidat_id: int) -> Response:
        return endpoint.delete_by_id(candidat_id)

    return router
