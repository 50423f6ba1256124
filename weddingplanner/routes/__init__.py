"""
Route registration for weddingplanner

This module registers all blueprint routes with the Flask application.
"""

def register_routes(app):
    """Register all application blueprints"""

    # Import blueprints
    from . import pages, auth, weddings, commitments

    app.register_blueprint(pages.bp)
    app.register_blueprint(auth.bp)
    app.register_blueprint(weddings.bp)
    app.register_blueprint(commitments.bp)
