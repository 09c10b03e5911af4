import logging
from typing import TypeVar, Generic, List, Type

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from catalog_sync.db.models import BaseModel
from catalog_sync.exceptions import DuplicateRecordError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)

# PostgreSQL error code for unique_violation
UNIQUE_VIOLATION = '23505'

class BaseRepository(Generic[T]):
    """Base repository with the insert and read operations shared by all tables"""
    
    def __init__(self, supabase: AsyncClient, table_name: str, model_class: Type[T]):
        self.supabase = supabase
        self.table_name = table_name
        self.model_class = model_class

    async def _execute(self, query):
        """Run a PostgREST query, translating client failures into StorageError"""
        try:
            return await query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(e.message or str(e)) from e
            logger.error(f"Query on {self.table_name} failed: {e.code} {e.message}")
            raise StorageError(e.message or str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"Could not reach the store for {self.table_name}: {e}")
            raise StorageError(str(e)) from e

    async def create(self, model: T) -> T:
        """Insert a new record. No upsert: conflicts raise DuplicateRecordError"""
        data = model.to_dict()
        result = await self._execute(self.supabase.table(self.table_name).insert(data))
        return self.model_class.from_dict(result.data[0]) if result.data else model

    async def list_all(self) -> List[T]:
        """Get all records"""
        result = await self._execute(self.supabase.table(self.table_name).select("*"))
        return [self.model_class.from_dict(item) for item in result.data]

