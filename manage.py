#!/usr/bin/env python3
"""
Cache database maintenance.

Usage:
    python manage.py init               # Create the cache tables
    python manage.py stats              # Row counts and newest write per table
    python manage.py clear              # Drop every cached entry
    python manage.py clear slot block   # Drop the entries of specific kinds
"""

import sys

from app.repositories import CacheRepository, Database, db_exists
from app.services.cache import POLICIES, ResourceKind
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=False)


def init_db(db: Database) -> None:
    existed = db_exists(DB_PATH)
    db.connect()
    logger.info("Cache tables ready in {} ({})", DB_PATH, "existing" if existed else "created")


def print_stats(repo: CacheRepository) -> None:
    rows = repo.stats()

    print("\n" + "=" * 60)
    print("CACHE STATS")
    print("=" * 60)
    for row in rows:
        newest = row["last_updated"].isoformat(sep=" ", timespec="seconds") if row["last_updated"] else "-"
        print(f"  {row['table']:<22} {row['rows']:>8,}   {newest}")
    print("=" * 60)
    print(f"  {'total':<22} {sum(r['rows'] for r in rows):>8,}")
    print("=" * 60 + "\n")


def clear_kinds(repo: CacheRepository, names: list[str]) -> bool:
    """Clear the tables of the named kinds; all tables when none are named."""
    if not names:
        repo.clear()
        return True

    valid = {k.value for k in ResourceKind}
    unknown = [n for n in names if n not in valid]
    if unknown:
        print(f"\nUnknown kinds: {', '.join(unknown)}")
        print(f"Known kinds: {', '.join(sorted(valid))}\n")
        return False

    tables = {POLICIES[ResourceKind(n)].table for n in names}
    for table in sorted(tables, key=lambda t: t.name):
        repo.clear(table)
    return True


def main():
    args = sys.argv[1:]
    if not args or args[0] not in ("init", "stats", "clear"):
        print(__doc__)
        sys.exit(1)

    command, rest = args[0], args[1:]
    if command != "init" and not db_exists(DB_PATH):
        print(f"\nNo cache database at {DB_PATH}. Run 'python manage.py init' first.\n")
        sys.exit(1)

    db = Database(DB_PATH)
    try:
        if command == "init":
            init_db(db)
            return

        db.connect()
        repo = CacheRepository(db)
        if command == "stats":
            print_stats(repo)
        elif not clear_kinds(repo, rest):
            sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
