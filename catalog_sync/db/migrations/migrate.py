"""
Migration runner script.
Uses DATABASE_URL from environment variables.
"""
import sys

from yoyo import get_backend, read_migrations

from catalog_sync import settings
from catalog_sync.db.migrations import MIGRATIONS_DIR

COMMANDS = ('apply', 'rollback', 'list', 'reapply')

def run_yoyo(command: str, database_url: str) -> None:
    """Run a yoyo command against ``database_url``."""
    backend = get_backend(database_url)
    migrations = read_migrations(str(MIGRATIONS_DIR))

    with backend.lock():
        if command == 'apply':
            backend.apply_migrations(backend.to_apply(migrations))
        elif command == 'rollback':
            # Roll back only the most recently applied migration
            backend.rollback_migrations(backend.to_rollback(migrations)[:1])
        elif command == 'reapply':
            last = backend.to_rollback(migrations)[:1]
            backend.rollback_migrations(last)
            backend.apply_migrations(backend.to_apply(migrations))
        elif command == 'list':
            applied = {m.id for m in backend.to_rollback(migrations)}
            for migration in migrations:
                status = 'A' if migration.id in applied else 'U'
                print(f"{status}  {migration.id}")

def main(argv=None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage:")
        print("  python -m catalog_sync.db.migrations.migrate <command>")
        print("\nAvailable commands:")
        print("  apply     - Apply pending migrations")
        print("  rollback  - Rollback last migration")
        print("  list      - List migration status")
        print("  reapply   - Rollback and reapply last migration")
        sys.exit(1)

    command = argv[0]
    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        sys.exit(1)

    if not settings.DATABASE_URL:
        print("Error: DATABASE_URL not found in environment variables")
        sys.exit(1)

    run_yoyo(command, settings.DATABASE_URL)

if __name__ == '__main__':
    main()
