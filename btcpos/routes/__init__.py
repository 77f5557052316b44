from btcpos.routes.auth import auth_bp
from btcpos.routes.customer import customer_bp
from btcpos.routes.vendor import vendor_bp
from btcpos.routes.admin import admin_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(customer_bp, url_prefix='/api/customer')
    app.register_blueprint(vendor_bp, url_prefix='/api/vendor')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
