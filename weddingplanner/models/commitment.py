"""
Commitment (RSVP) model linking a guest to a wedding
"""

from datetime import datetime
from peewee import DateTimeField, ForeignKeyField
from weddingplanner.models import BaseModel
from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding

class Commitment(BaseModel):
    """A guest's RSVP to a wedding"""
    user = ForeignKeyField(User, backref='commitments', on_delete='CASCADE')
    wedding = ForeignKeyField(Wedding, backref='guests', on_delete='CASCADE')
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = 'commitments'
        indexes = (
            (('user', 'wedding'), True),  # One RSVP per user per wedding
        )

    def __str__(self):
        return f"{self.user.full_name} -> {self.wedding.title}"

    def __repr__(self):
        return f"<Commitment: {self.user_id} at {self.wedding_id}>"
