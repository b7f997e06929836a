from flask import Flask
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy.orm import DeclarativeBase
from datetime import date, datetime
from enum import Enum


from config import Config


# JSON provider that keeps naive datetimes in ISO format and enums by value
class TripboardJSONProvider(DefaultJSONProvider):
    def default(self, obj):
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


class Base(DeclarativeBase):
    pass
db = SQLAlchemy(model_class=Base)
migrate = Migrate()



def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (console + file)
    from .common.logging_config import setup_logging
    setup_logging(app)

    app.json = TripboardJSONProvider(app)

    CORS(app, resources={r"/*": {
        "origins": app.config.get("CORS_ORIGINS", "*"),
        "methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": "*",
        "expose_headers": "*"
    }})

    db.init_app(app)
    migrate.init_app(app, db)

    # Models must be imported before metadata is used by migrations or create_all
    from . import model  # noqa: F401

    from .core.di_setup import init_di
    init_di()

    from .controller.plan import init_app as plan_api_init
    app.register_blueprint(plan_api_init())

    from .controller.place import init_app as place_api_init
    app.register_blueprint(place_api_init())

    from .controller.health import init_app as health_api_init
    app.register_blueprint(health_api_init())

    from .common.errors import handle_exception
    app.register_error_handler(Exception, handle_exception)

    app.logger.info("Tripboard application initialized")
    return app
