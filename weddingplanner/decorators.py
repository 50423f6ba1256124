"""
Session identity helpers for weddingplanner

The session holds at most the logged-in user's id. Protected handlers are
wrapped with user_required, which sends anonymous visitors back to the
login page before the handler runs.
"""

from functools import wraps
from typing import Optional

from flask import redirect, url_for
from flask_login import current_user


def current_user_id() -> Optional[int]:
    """Id of the logged-in user, or None for an anonymous session"""
    if not current_user.is_authenticated:
        return None
    return current_user.id


def user_required(f):
    """Decorator to require a logged-in user"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user_id() is None:
            return redirect(url_for('auth.index'))
        return f(*args, **kwargs)
    return decorated_function


def anonymous_only(f):
    """Decorator for login/registration pages: logged-in users go to the listing"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user_id() is not None:
            return redirect(url_for('weddings.weddings_list'))
        return f(*args, **kwargs)
    return decorated_function
