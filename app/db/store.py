"""Candidat persistence adapters.

``CandidatStore`` is the capability the REST layer depends on.  Two
implementations are provided:

* ``InMemoryCandidatStore`` -- process-local dict, the default backend.
* ``SupabaseCandidatStore`` -- rows in the Supabase ``candidats`` table.

``get_store()`` builds the one selected by ``settings.STORE_BACKEND``.
Deleting an id that does not exist is a no-op in both adapters.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Protocol

from app.core.config import settings
from app.core.errors import StoreError
from app.db.supabase import get_supabase
from app.models.candidat import Candidat

logger = logging.getLogger(__name__)


class CandidatStore(Protocol):
    """Persistence capability used by ``CandidatEndpoint``."""

    def save(self, candidat: Candidat) -> Candidat:
        """Insert (``id`` is None) or upsert the candidat; return the stored record."""
        ...

    def find_all(self) -> list[Candidat]:
        ...

    def find_one(self, candidat_id: int) -> Candidat | None:
        ...

    def delete(self, candidat_id: int) -> None:
        ...

    def ping(self) -> bool:
        """Return True when the backend is reachable."""
        ...


# ---------------------------------------------------------------------------
# In-memory backend
# ---------------------------------------------------------------------------

class InMemoryCandidatStore:
    """Thread-safe dict-backed store with sequential ids starting at 1."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    def save(self, candidat: Candidat) -> Candidat:
        with self._lock:
            data = candidat.model_dump()
            if data["id"] is None:
                data["id"] = self._next_id
            self._next_id = max(self._next_id, data["id"] + 1)
            self._rows[data["id"]] = copy.deepcopy(data)
            return Candidat(**data)

    def find_all(self) -> list[Candidat]:
        with self._lock:
            return [self._load(self._rows[k]) for k in sorted(self._rows)]

    def find_one(self, candidat_id: int) -> Candidat | None:
        with self._lock:
            row = self._rows.get(candidat_id)
            return self._load(row) if row is not None else None

    def delete(self, candidat_id: int) -> None:
        with self._lock:
            self._rows.pop(candidat_id, None)

    def ping(self) -> bool:
        return True

    @staticmethod
    def _load(row: dict[str, Any]) -> Candidat:
        return Candidat(**copy.deepcopy(row))


# ---------------------------------------------------------------------------
# Supabase backend
# ---------------------------------------------------------------------------

class SupabaseCandidatStore:
    """Store backed by a Supabase table; ids come from the table's identity column."""

    def __init__(self, table: str | None = None) -> None:
        self.table = table or settings.CANDIDAT_TABLE

    def _table(self) -> Any:
        return get_supabase().table(self.table)

    def save(self, candidat: Candidat) -> Candidat:
        payload = candidat.model_dump()
        try:
            if payload["id"] is None:
                payload.pop("id")
                result = self._table().insert(payload).execute()
            else:
                result = self._table().upsert(payload).execute()
        except Exception as exc:
            logger.error(
                "candidat_save_failed",
                extra={"table": self.table, "error_message": str(exc)},
            )
            raise StoreError(f"Failed to save candidat: {exc}") from exc

        if not result.data:
            raise StoreError("Supabase returned no row for saved candidat")
        return Candidat(**result.data[0])

    def find_all(self) -> list[Candidat]:
        try:
            result = self._table().select("*").order("id").execute()
        except Exception as exc:
            logger.error(
                "candidat_list_failed",
                extra={"table": self.table, "error_message": str(exc)},
            )
            raise StoreError(f"Failed to list candidats: {exc}") from exc
        return [Candidat(**row) for row in result.data or []]

    def find_one(self, candidat_id: int) -> Candidat | None:
        try:
            result = (
                self._table()
                .select("*")
                .eq("id", candidat_id)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            logger.error(
                "candidat_load_failed",
                extra={
                    "table": self.table,
                    "candidat_id": candidat_id,
                    "error_message": str(exc),
                },
            )
            raise StoreError(f"Failed to load candidat {candidat_id}: {exc}") from exc
        if not result.data:
            return None
        return Candidat(**result.data[0])

    def delete(self, candidat_id: int) -> None:
        try:
            self._table().delete().eq("id", candidat_id).execute()
        except Exception as exc:
            logger.error(
                "candidat_delete_failed",
                extra={
                    "table": self.table,
                    "candidat_id": candidat_id,
                    "error_message": str(exc),
                },
            )
            raise StoreError(f"Failed to delete candidat {candidat_id}: {exc}") from exc

    def ping(self) -> bool:
        try:
            result = self._table().select("id").limit(1).execute()
        except Exception:
            logger.warning("Supabase ping failed", exc_info=True)
            return False
        return result is not None


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def get_store(backend: str | None = None) -> CandidatStore:
    """Build the store named by *backend* (default ``settings.STORE_BACKEND``)."""
    name = (backend or settings.STORE_BACKEND).strip().lower()
    if name == "memory":
        return InMemoryCandidatStore()
    if name == "supabase":
        return SupabaseCandidatStore()
    raise ValueError(f"Unknown store backend: {name}")
