"""FastAPI dependencies for dependency injection.

Usage in routes:
    from trackrecords.api.dependencies import RecordDAODep

    @router.get("/records")
    def list_records(dao: RecordDAODep):
        return dao.load_all().records
"""

from typing import Annotated

from fastapi import Depends

from trackrecords.config import Settings, get_settings
from trackrecords.dao.record_dao import RecordDAO


def get_settings_dep() -> Settings:
    """Get application settings (dependency wrapper)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


def get_record_dao(settings: SettingsDep) -> RecordDAO:
    """Get a RecordDAO for the configured source. One per request."""
    return RecordDAO(settings.data_file, settings.csv_delimiter)


RecordDAODep = Annotated[RecordDAO, Depends(get_record_dao)]
