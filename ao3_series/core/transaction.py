import copy
from typing import Any, Callable

from loguru import logger
from pydantic import BaseModel

from ao3_series.settings import settings


class UnitOfWork:
    """
    Applies changes to several models as one all-or-nothing step

    Register every model before changing it. If the block raises, each registered field is put back
    to the value it had when registered and the exception propagates. Commit callbacks run once the
    block finishes cleanly, so a persistence layer can flush there; if one of them raises, the
    changes are rolled back as well.

    Args:
        debug (bool): Log commits and rollbacks. Defaults to the global DEBUG setting

    Example:
    ```
    with UnitOfWork() as uow:
        uow.register(series, "authors")
        series.authors = remaining
    ```
    """

    def __init__(self, debug: bool | None = None):
        self.DEBUG = settings.DEBUG if debug is None else debug
        self._snapshots: dict[int, tuple[BaseModel, dict[str, Any]]] = {}
        self._on_commit: list[Callable[[], None]] = []

    def register(self, entity: BaseModel, *fields: str):
        """
        Snapshots fields of a model so they can be restored on failure.

        Registering the same model again adds any new fields; fields already snapshotted keep
        their first value.

        Args:
            entity (BaseModel): Model about to change
            *fields (str): Field names to snapshot
        """

        _, values = self._snapshots.setdefault(id(entity), (entity, {}))
        for name in fields:
            if name not in values:
                values[name] = copy.copy(getattr(entity, name))

    def on_commit(self, callback: Callable[[], None]):
        self._on_commit.append(callback)

    def rollback(self):
        for entity, values in reversed(list(self._snapshots.values())):
            for name, value in values.items():
                setattr(entity, name, value)
        self._debug_log(f"Rolled back {len(self._snapshots)} entities")
        self._snapshots.clear()
        self._on_commit.clear()

    def commit(self):
        """
        Runs the commit callbacks, then forgets the snapshots.

        Raises:
            Exception: Whatever a commit callback raised, after rolling back
        """

        callbacks, self._on_commit = self._on_commit, []
        try:
            for callback in callbacks:
                callback()
        except Exception as exc:
            self._debug_error(f"Commit failed: {exc}")
            self.rollback()
            raise

        self._debug_log(f"Committed {len(self._snapshots)} entities")
        self._snapshots.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self._debug_error(f"Unit of work failed: {exc}")
            self.rollback()
            return False

        self.commit()
        return False

    def _debug_log(self, *args, **kwargs):
        """
        Debug Mode Only: Basic log
        """

        if not self.DEBUG:
            return

        logger.opt(depth=1).debug(*args, **kwargs)

    def _debug_error(self, *args, **kwargs):
        """
        Debug Mode Only: Error log
        """

        if not self.DEBUG:
            return

        logger.opt(depth=1).error(*args, **kwargs)
