"""
Commitment (RSVP) routes for weddingplanner
"""

from flask import Blueprint, render_template, request, redirect, url_for, current_app
from peewee import IntegrityError

from weddingplanner.models.commitment import Commitment
from weddingplanner.database import database
from weddingplanner.decorators import user_required, current_user_id
from weddingplanner.validation import ValidationResult, validate_commitment

bp = Blueprint('commitments', __name__, url_prefix='/commitments')


@bp.route('/create', methods=['POST'])
@user_required
def create_commitment():
    """RSVP the current user to a wedding"""
    # The guest is always the session user; only the wedding comes from the form
    user_id = current_user_id()
    wedding_id = request.form.get('wedding_id', default=0, type=int)

    results = validate_commitment(user_id, wedding_id, database)
    if not results:
        try:
            Commitment.create(user=user_id, wedding=wedding_id)
        except IntegrityError:
            # The store changed between validation and insert; validate again to explain why
            current_app.logger.warning(f"Commitment ({user_id}, {wedding_id}) rejected by the store")
            results = (validate_commitment(user_id, wedding_id, database)
                       or [ValidationResult('commitment', "The commitment must not exist already.")])

    if results:
        current_app.logger.warning(f"Commitment rejected for user {user_id}, wedding {wedding_id}: "
                                   f"{', '.join(r.message for r in results)}")
        return render_template('commitments/invalid.html', results=results)

    current_app.logger.info(f"User {user_id} committed to wedding {wedding_id}")
    return redirect(url_for('weddings.weddings_list'))


@bp.route('/<int:commitment_id>/destroy', methods=['POST'])
@user_required
def delete_commitment(commitment_id):
    """Withdraw an RSVP; a no-op unless it belongs to the current user"""
    commitment = Commitment.get_by_row_id(commitment_id)
    if commitment is not None and commitment.user_id == current_user_id():
        commitment.delete_instance()
        current_app.logger.info(f"User {current_user_id()} withdrew commitment {commitment_id}")
    else:
        current_app.logger.warning(f"Ignored delete of commitment {commitment_id} by user {current_user_id()}")
    return redirect(url_for('weddings.weddings_list'))
