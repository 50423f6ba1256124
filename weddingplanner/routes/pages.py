"""
Static page routes for weddingplanner
"""

from flask import Blueprint, render_template

bp = Blueprint('pages', __name__)


@bp.route('/privacy')
def privacy():
    return render_template('pages/privacy.html')
