"""Supabase-backed persistence for drips."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx
from postgrest.exceptions import APIError

from ..models import DripUpdate, DripView, QueryResult

logger = logging.getLogger(__name__)

LIST_COLUMNS = 'id, url, username, x, y'

StoreError = (APIError, httpx.HTTPError)


def error_message(exc: Exception) -> str:
    return getattr(exc, 'message', None) or str(exc)


class MixedBatchError(ValueError):
    """Rows of one update batch do not all carry the same fields."""

    def __init__(self, field_sets: List[List[str]]) -> None:
        self.field_sets = field_sets
        super().__init__(
            'All rows in a batch must carry the same fields, got: '
            + '; '.join(', '.join(fields) for fields in field_sets)
        )


class DripService:
    """Thin wrapper around the Supabase table holding every drip."""

    def __init__(self, client: Any, table: str = 'drips') -> None:
        self._client = client
        self._table = table

    def list_images(self) -> QueryResult:
        """Return every drip shaped for the canvas, in store order."""

        try:
            response = self._client.table(self._table).select(LIST_COLUMNS).execute()
        except StoreError as exc:
            message = error_message(exc)
            logger.error('Error fetching data from drips table: %s', message)
            return QueryResult(error=message)

        rows = response.data or []
        return QueryResult(data=[DripView.from_row(row) for row in rows])

    def fetch_all(self) -> QueryResult:
        """Return every column of every drip."""

        try:
            response = self._client.table(self._table).select('*').execute()
        except StoreError as exc:
            message = error_message(exc)
            logger.warning('Could not read drips for focused canvas: %s', message)
            return QueryResult(error=message)

        return QueryResult(data=list(response.data or []))

    def upsert_positions(self, updates: List[DripUpdate]) -> None:
        """Insert or update all ``updates`` in a single call keyed on ``id``.

        PostgREST merges every row of a bulk upsert over the union of the
        batch's keys, so a row missing one of those keys would have that
        column reset. Batches whose rows carry different field sets raise
        :class:`MixedBatchError` before anything is sent.

        Raises the store error unchanged so the caller decides how to report it.
        """

        rows: List[Dict[str, Any]] = [update.to_row() for update in updates]
        if not rows:
            return

        field_sets = {frozenset(row) for row in rows}
        if len(field_sets) > 1:
            raise MixedBatchError(sorted(sorted(fields) for fields in field_sets))

        (
            self._client.table(self._table)
            .upsert(rows, on_conflict='id', default_to_null=False)
            .execute()
        )
        logger.debug('Upserted %d drip(s)', len(rows))
