"""
Wedding model
"""

from datetime import datetime
from peewee import CharField, TextField, DateTimeField, ForeignKeyField
from weddingplanner.models import BaseModel
from weddingplanner.models.user import User

class Wedding(BaseModel):
    """A wedding planned by one user and open for RSVPs from everyone else"""
    nearlywed_one = CharField()
    nearlywed_two = CharField()
    date = DateTimeField()
    address = TextField()
    creator = ForeignKeyField(User, backref='created_weddings', column_name='user_id',
                              object_id_name='creator_id', on_delete='CASCADE')

    created_at = DateTimeField(default=datetime.now)
    updated_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = 'weddings'

    def __str__(self):
        return f"{self.title} - {self.date.strftime('%Y-%m-%d')}"

    @property
    def title(self):
        return f"{self.nearlywed_one} & {self.nearlywed_two}"

    def get_date_display(self):
        return self.date.strftime('%B %d, %Y')
