from flask import current_app, g
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from werkzeug.local import LocalProxy

from tm_utils.logger_utils import logger


def get_db() -> Database:
    """
    Return the MongoDB database for the current application context.

    One MongoClient is shared per app (it pools connections and is
    thread-safe); the database handle is cached on `g` for the request.
    """
    if 'db' not in g:
        if 'mongo_client' not in current_app.extensions:
            current_app.extensions['mongo_client'] = MongoClient(current_app.config['MONGO_URI'])

        # The database name is part of MONGO_URI, e.g. mongodb://host:27017/testmaker
        g.db = current_app.extensions['mongo_client'].get_database()

    return g.db


def ensure_indexes(database: Database) -> None:
    """Create the indexes used by the quiz listings and the author lookup."""
    database.quizzes.create_index([("created_date", DESCENDING), ("_id", ASCENDING)])
    database.quizzes.create_index([("title", ASCENDING), ("_id", ASCENDING)])
    database.users.create_index("user_name", unique=True)
    logger.info("database.ensure_indexes.ok", extra={"db": database.name})


def init_app(app):
    """Register database teardown with the Flask app."""
    @app.teardown_appcontext
    def close_db(exception):
        # The client stays open; it is shared via app.extensions
        g.pop('db', None)


# LocalProxy so modules can import `db` at load time
db = LocalProxy(get_db)
