"""
Form and cross-entity validation for weddingplanner

Each entity has an ordered list of validators. A validator receives the
submitted data and a handle to the store and returns a list of
ValidationResult tuples; an empty list means the data passed. Validators
that need the store take it as an explicit argument.
"""

from collections import namedtuple
from datetime import date, datetime

from email_validator import validate_email, EmailNotValidError

from weddingplanner.models import is_row_id
from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding
from weddingplanner.models.commitment import Commitment

ValidationResult = namedtuple('ValidationResult', ['field', 'message'])

PASSWORD_MIN_LENGTH = 8
DATE_FORMATS = ('%Y-%m-%d', '%Y-%m-%dT%H:%M', '%Y-%m-%d %H:%M')

CONTEXT_ERROR = "Could not retrieve database context to perform validation."
LOGIN_ERROR = "Email or Password is invalid"


def is_blank(value):
    return value is None or not str(value).strip()


def is_valid_email_format(value):
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def parse_wedding_date(value):
    """Parse a submitted date, returning None when missing or unparsable"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if is_blank(value):
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
    return None


def group_errors(results):
    """Group validation results into {field: [messages]} for templates"""
    errors = {}
    for result in results:
        errors.setdefault(result.field, []).append(result.message)
    return errors


def run_validators(validators, data, db):
    results = []
    for validator in validators:
        results.extend(validator(data, db))
    return results


# Registration

def _first_name(data, db):
    if is_blank(data.get('first_name')):
        return [ValidationResult('first_name', "First name is required.")]
    return []


def _last_name(data, db):
    if is_blank(data.get('last_name')):
        return [ValidationResult('last_name', "Last name is required.")]
    return []


def _unique_email(data, db):
    email = data.get('email')
    if is_blank(email):
        return [ValidationResult('email', "Email is required.")]
    if not is_valid_email_format(email):
        return [ValidationResult('email', "Email must be a valid email address.")]
    if db is None:
        return [ValidationResult('email', CONTEXT_ERROR)]
    if User.select().where(User.email == email.strip()).exists(db):
        return [ValidationResult('email', "Email must be unique.")]
    return []


def _password(data, db):
    password = data.get('password')
    if not password:
        return [ValidationResult('password', "Password is required.")]
    if len(password) < PASSWORD_MIN_LENGTH:
        return [ValidationResult('password',
                                 f"Password must be at least {PASSWORD_MIN_LENGTH} characters.")]
    return []


def _confirm_password(data, db):
    if data.get('confirm_password') != data.get('password'):
        return [ValidationResult('confirm_password', "Passwords must match.")]
    return []


REGISTRATION_VALIDATORS = [_first_name, _last_name, _unique_email, _password, _confirm_password]


def validate_registration(data, db):
    return run_validators(REGISTRATION_VALIDATORS, data, db)


# Login

def _login_email(data, db):
    email = data.get('email')
    if is_blank(email):
        return [ValidationResult('email', "Email is required.")]
    if not is_valid_email_format(email):
        return [ValidationResult('email', "Email must be a valid email address.")]
    return []


def _login_password(data, db):
    if not data.get('password'):
        return [ValidationResult('password', "Password is required.")]
    return []


LOGIN_VALIDATORS = [_login_email, _login_password]


def validate_login(data):
    """Shape checks only; credentials are checked by the login handler"""
    return run_validators(LOGIN_VALIDATORS, data, None)


# Weddings

def _nearlyweds(data, db):
    results = []
    for field in ('nearlywed_one', 'nearlywed_two'):
        if is_blank(data.get(field)):
            results.append(ValidationResult(field, "Wedding must have two Nearlyweds."))
    return results


def _future_date(data, db):
    when = parse_wedding_date(data.get('date'))
    if when is None:
        return [ValidationResult('date', "Wedding must have date.")]
    if when.date() <= data['today']:
        return [ValidationResult('date', "Wedding must be in future.")]
    return []


def _address(data, db):
    if is_blank(data.get('address')):
        return [ValidationResult('address', "Wedding must have address.")]
    return []


WEDDING_VALIDATORS = [_nearlyweds, _future_date, _address]


def validate_wedding(data, today=None):
    """Validate wedding fields; `today` overrides the current date"""
    data = dict(data, today=today or date.today())
    return run_validators(WEDDING_VALIDATORS, data, None)


# Commitments

def validate_commitment(user_id, wedding_id, db):
    """Check that a guest may RSVP to a wedding.

    Checks run in order and the first three stop at the first failure:
    unset ids, missing store handle, duplicate RSVP. The guest and wedding
    existence checks are independent and can both fail.
    """
    if not user_id or not wedding_id:
        return [ValidationResult('commitment', "Commitment isn't fully initialized")]
    if db is None:
        return [ValidationResult('commitment', CONTEXT_ERROR)]

    # Ids that cannot be bound to a query name no row
    guest_exists = is_row_id(user_id) and User.select().where(User.id == user_id).exists(db)
    wedding_exists = (is_row_id(wedding_id)
                      and Wedding.select().where(Wedding.id == wedding_id).exists(db))

    if guest_exists and wedding_exists:
        duplicate = (Commitment.select()
                     .where((Commitment.user == user_id) & (Commitment.wedding == wedding_id))
                     .exists(db))
        if duplicate:
            return [ValidationResult('commitment', "The commitment must not exist already.")]

    results = []
    if not guest_exists:
        results.append(ValidationResult('user_id', "The RSVPing guest must exist."))
    if not wedding_exists:
        results.append(ValidationResult('wedding_id', "The wedding must exist in order to RSVP."))
    return results
