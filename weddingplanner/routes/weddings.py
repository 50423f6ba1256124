"""
Wedding routes for weddingplanner

Handles wedding listing, creation, detail and deletion.
"""

from collections import namedtuple

from flask import Blueprint, render_template, request, redirect, url_for, current_app
from peewee import fn

from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding
from weddingplanner.models.commitment import Commitment
from weddingplanner.database import database
from weddingplanner.decorators import user_required, current_user_id
from weddingplanner.validation import validate_wedding, parse_wedding_date, group_errors

bp = Blueprint('weddings', __name__, url_prefix='/weddings')

WEDDING_FIELDS = ('nearlywed_one', 'nearlywed_two', 'date', 'address')

WeddingView = namedtuple('WeddingView', [
    'id', 'nearlywed_one', 'nearlywed_two', 'date', 'address',
    'guest_count',     # all commitments for the wedding
    'my_commitments',  # the current user's commitments (zero or one)
    'can_delete',      # current user created the wedding
])


def build_wedding_views(user_id):
    """Every wedding, shaped for the listing page of the given user"""
    weddings = Wedding.select().order_by(Wedding.date, Wedding.id)

    guest_counts = dict(Commitment
                        .select(Commitment.wedding, fn.COUNT(Commitment.id))
                        .group_by(Commitment.wedding)
                        .tuples())

    my_commitments = {}
    for commitment in Commitment.select().where(Commitment.user == user_id):
        my_commitments.setdefault(commitment.wedding_id, []).append(commitment)

    return [WeddingView(id=wedding.id,
                        nearlywed_one=wedding.nearlywed_one,
                        nearlywed_two=wedding.nearlywed_two,
                        date=wedding.date,
                        address=wedding.address,
                        guest_count=guest_counts.get(wedding.id, 0),
                        my_commitments=my_commitments.get(wedding.id, []),
                        can_delete=wedding.creator_id == user_id)
            for wedding in weddings]


@bp.route('')
@user_required
def weddings_list():
    """List all weddings"""
    return render_template('weddings/list.html', weddings=build_wedding_views(current_user_id()))


@bp.route('/new')
@user_required
def new_wedding():
    """New wedding form"""
    return render_template('weddings/new.html', form={}, errors={})


@bp.route('/create', methods=['POST'])
@user_required
def create_wedding():
    """Create a wedding owned by the current user"""
    form = {field: request.form.get(field, '') for field in WEDDING_FIELDS}

    results = validate_wedding(form)
    if results:
        current_app.logger.warning(f"Wedding creation validation failed for user {current_user_id()}: "
                                   f"{', '.join(r.message for r in results)}")
        return render_template('weddings/new.html', form=form, errors=group_errors(results))

    # The creator is always the session user, whatever else was submitted.
    # The creator is not added as a guest.
    wedding = Wedding.create(nearlywed_one=form['nearlywed_one'].strip(),
                             nearlywed_two=form['nearlywed_two'].strip(),
                             date=parse_wedding_date(form['date']),
                             address=form['address'].strip(),
                             creator=current_user_id())
    current_app.logger.info(f"User {current_user_id()} created wedding {wedding.id}")
    return redirect(url_for('weddings.weddings_list'))


@bp.route('/<int:wedding_id>')
@user_required
def wedding_detail(wedding_id):
    """Show one wedding with its guest list"""
    wedding = Wedding.get_by_row_id(wedding_id)
    if wedding is None:
        return redirect(url_for('weddings.weddings_list'))

    guests = (Commitment
              .select(Commitment, User)
              .join(User)
              .where(Commitment.wedding == wedding)
              .order_by(Commitment.id))

    return render_template('weddings/detail.html',
                           wedding=wedding,
                           guests=list(guests),
                           can_delete=wedding.creator_id == current_user_id())


@bp.route('/<int:wedding_id>/destroy', methods=['POST'])
@user_required
def delete_wedding(wedding_id):
    """Delete a wedding and its commitments; a no-op unless the user created it"""
    wedding = Wedding.get_by_row_id(wedding_id)
    if wedding is not None and wedding.creator_id == current_user_id():
        with database.atomic():
            Commitment.delete().where(Commitment.wedding == wedding).execute()
            wedding.delete_instance()
        current_app.logger.info(f"User {current_user_id()} deleted wedding {wedding_id}")
    else:
        current_app.logger.warning(f"Ignored delete of wedding {wedding_id} by user {current_user_id()}")
    return redirect(url_for('weddings.weddings_list'))
