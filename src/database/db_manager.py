# database/db_manager.py
from flask_sqlalchemy import SQLAlchemy
import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.errors import StorageError
from src.models.dto import AlbumRecord

# Initialize the SQLAlchemy object
db = SQLAlchemy()
logger = logging.getLogger(__name__)


class Album(db.Model):
    # Table is owned by the recordings database; the app never migrates it
    __tablename__ = 'album'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(128), nullable=False)
    artist = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(5, 2, asdecimal=False), nullable=False)
    local_fg = db.Column(db.Boolean, default=False, nullable=False)

    def __repr__(self):
        return f'<Album {self.id}: {self.title} by {self.artist}>'

    def to_dict(self):
        """Converts the Album row to a plain dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'artist': self.artist,
            'price': self.price,
            'local_fg': bool(self.local_fg),
        }

    def to_record(self) -> AlbumRecord:
        return AlbumRecord(**self.to_dict())


def check_connection() -> None:
    """Round-trip a trivial query; raises StorageError if the store is unreachable."""
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f"ping: {e}") from e


def initialize_database(app):
    """
    Binds the SQLAlchemy extension to the Flask app and verifies that the
    configured database answers. Tables are not created here; the `album`
    table belongs to the external recordings schema (see `manage.py create_db`).
    """
    db.init_app(app)
    with app.app_context():
        check_connection()
        logger.info("Connected to database %s", db.engine.url.render_as_string(hide_password=True))


def create_tables(app):
    """Creates the album table if it does not exist yet."""
    with app.app_context():
        db.create_all()
        logger.info("Database tables created or already exist.")
