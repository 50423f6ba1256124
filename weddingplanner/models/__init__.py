"""
Base model for all database models
"""

from peewee import Model
from weddingplanner.database import database

# SQLite INTEGER primary keys are signed 64-bit
MAX_ROW_ID = 2 ** 63 - 1


def is_row_id(value):
    """True when `value` can name a row; larger ids cannot be bound by SQLite"""
    return 0 < value <= MAX_ROW_ID


class BaseModel(Model):
    """Base model class that all models should inherit from"""

    class Meta:
        database = database

    @classmethod
    def get_by_row_id(cls, row_id):
        """Fetch a row by primary key, or None when it is missing or out of range"""
        if not is_row_id(row_id):
            return None
        return cls.get_or_none(cls.id == row_id)
