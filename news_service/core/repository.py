from abc import ABC, abstractmethod

from pydantic import BaseModel


class BaseRepository(ABC):
    """Read-only repository over rows built in memory.

    Subclasses set ``schema`` and implement ``_rows``. Rows are plain dicts and
    are validated into ``schema`` on every read, so each call returns fresh
    objects.
    """

    schema: type[BaseModel] | None = None

    @abstractmethod
    def _rows(self) -> list[dict]:
        ...

    def _validate(self, row: dict) -> BaseModel:
        return self.schema.model_validate(row)

    async def get_all(self):
        return [self._validate(row) for row in self._rows()]
