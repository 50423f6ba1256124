#!/usr/bin/env python3

import os

from flask import Flask, render_template
from flask_login import LoginManager
from dotenv import load_dotenv

# Import database and models
from weddingplanner.database import database, init_database
from weddingplanner.models.user import User

# Load environment variables
load_dotenv()

TEMPLATE_FOLDER = os.path.join(os.path.dirname(__file__), 'templates')

app = Flask(__name__, template_folder=TEMPLATE_FOLDER)

# Configure Flask app
app.secret_key = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
app.config['SESSION_COOKIE_SECURE'] = os.getenv('SESSION_COOKIE_SECURE', 'false').lower() == 'true'
app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'

# Initialize database
init_database()

# Initialize Flask-Login
login_manager = LoginManager()
login_manager.init_app(app)


@login_manager.user_loader
def load_user(user_id):
    """Load user from database"""
    try:
        return User.get_by_id(int(user_id))
    except (User.DoesNotExist, ValueError):
        return None


@app.before_request
def _db_connect():
    database.connect(reuse_if_open=True)


@app.teardown_request
def _db_close(exc):
    if not database.is_closed():
        database.close()


@app.errorhandler(404)
def not_found(e):
    return render_template('errors/error.html', status_code=404,
                           message="The page you were looking for doesn't exist."), 404


@app.errorhandler(500)
def server_error(e):
    app.logger.error("Unhandled application error",
                     exc_info=getattr(e, 'original_exception', None) or e)
    return render_template('errors/error.html', status_code=500,
                           message="Something went wrong on our end."), 500


# Register route blueprints
from weddingplanner.routes import register_routes
register_routes(app)
