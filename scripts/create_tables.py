"""Create the pizzas, orders and messages tables if they do not exist."""
import sys
import os
import logging

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import SQLAlchemyError

from pizzeria import create_app
from pizzeria.config import config_for_env
from pizzeria.extensions import db
import pizzeria.models  # noqa: F401

logger = logging.getLogger('pizzeria.scripts.create_tables')


def main():
    class ScriptConfig(config_for_env()):
        AUTO_CREATE_TABLES = False

    app = create_app(ScriptConfig)
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError:
            logger.exception('Error creating tables')
            return 1
    logger.info('All tables created successfully')
    return 0


if __name__ == '__main__':
    sys.exit(main())
