"""
Authentication routes for weddingplanner

Handles registration, email/password login and logout.
"""

from flask import Blueprint, render_template, redirect, url_for, request, session, current_app
from flask_login import login_user, logout_user
from peewee import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from weddingplanner.models.user import User
from weddingplanner.database import database
from weddingplanner.decorators import anonymous_only
from weddingplanner.validation import (ValidationResult, validate_registration, validate_login,
                                       group_errors, LOGIN_ERROR)

bp = Blueprint('auth', __name__)

REGISTER_FIELDS = ('first_name', 'last_name', 'email', 'password', 'confirm_password')
LOGIN_FIELDS = ('email', 'password')

_dummy_hash = None


def _burn_password_check(password):
    """Spend the same hashing work for unknown emails as for wrong passwords"""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = generate_password_hash('not-a-real-password')
    check_password_hash(_dummy_hash, password)


def render_entry_page(register_form=None, register_errors=None, login_form=None, login_errors=None):
    """Render the combined login/registration page, keeping entered values"""
    # Never echo passwords back into the form
    def public(form):
        return {k: v for k, v in (form or {}).items() if 'password' not in k}

    return render_template('index.html',
                           register_form=public(register_form),
                           register_errors=register_errors or {},
                           login_form=public(login_form),
                           login_errors=login_errors or {})


@bp.route('/')
@anonymous_only
def index():
    """Display login and registration forms"""
    return render_entry_page()


@bp.route('/users/create', methods=['POST'])
@anonymous_only
def create_user():
    """Register a new user and log them in"""
    form = {field: request.form.get(field, '') for field in REGISTER_FIELDS}

    results = validate_registration(form, database)
    if results:
        current_app.logger.warning(f"Registration rejected for {form['email']!r}: "
                                   f"{', '.join(r.message for r in results)}")
        return render_entry_page(register_form=form, register_errors=group_errors(results))

    user = User(first_name=form['first_name'].strip(),
                last_name=form['last_name'].strip(),
                email=form['email'].strip())
    user.set_password(form['password'])
    try:
        user.save()
    except IntegrityError:
        # Another request registered this email between the check and the insert
        current_app.logger.warning(f"Duplicate email {user.email!r} caught by unique index")
        results = [ValidationResult('email', "Email must be unique.")]
        return render_entry_page(register_form=form, register_errors=group_errors(results))

    login_user(user)
    current_app.logger.info(f"Registered user {user.id}")
    return redirect(url_for('weddings.weddings_list'))


@bp.route('/login', methods=['POST'])
@anonymous_only
def login():
    """Log in with email and password"""
    form = {field: request.form.get(field, '') for field in LOGIN_FIELDS}

    results = validate_login(form)
    if not results:
        user = User.get_or_none(User.email == form['email'].strip())
        if user is None:
            _burn_password_check(form['password'])
            results = [ValidationResult('email', LOGIN_ERROR)]
        elif not user.check_password(form['password']):
            results = [ValidationResult('email', LOGIN_ERROR)]

    if results:
        current_app.logger.warning(f"Failed login for {form['email']!r}")
        return render_entry_page(login_form=form, login_errors=group_errors(results))

    login_user(user)
    current_app.logger.info(f"User {user.id} logged in")
    return redirect(url_for('weddings.weddings_list'))


@bp.route('/logout', methods=['POST'])
def logout():
    """Clear the whole session"""
    logout_user()
    session.clear()
    return redirect(url_for('auth.index'))
