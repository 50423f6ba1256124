"""
User model for email/password accounts
"""

from datetime import datetime
from peewee import CharField, DateTimeField
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from weddingplanner.models import BaseModel

class User(UserMixin, BaseModel):
    """Registered planner or guest"""
    first_name = CharField()
    last_name = CharField()
    email = CharField(unique=True)
    password_hash = CharField()
    created_at = DateTimeField(default=datetime.now)
    updated_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = 'users'

    def __str__(self):
        return f"User({self.full_name} - {self.email})"

    def __repr__(self):
        return f"<User: {self.id} ({self.email})>"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
