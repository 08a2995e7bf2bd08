# manage.py
import sys

from app import create_app
from src.database.db_manager import create_tables

USAGE = "Usage: python manage.py create_db"


def create_db():
    """Creates the album table in the configured database."""
    app = create_app()
    print(f"Creating tables in {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]}")
    create_tables(app)
    print("Database tables created!")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(f"No command provided. {USAGE}")
        return 1
    command = args[0]
    if command == 'create_db':
        create_db()
        return 0
    print(f"Unknown command: {command}")
    print(USAGE)
    return 1


if __name__ == '__main__':
    sys.exit(main())
