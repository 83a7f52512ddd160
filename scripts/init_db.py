from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.soccer_api.soccer_api.database.bootstrap import init_schema, list_tables
from src.soccer_api.soccer_api.main import create_app, db_label


def main() -> None:
    app = create_app()
    init_schema(app)
    tables = list_tables(app)
    print(f"OK: schema ready -> {db_label(app.config['SQLALCHEMY_DATABASE_URI'])} (tables={len(tables)})")


if __name__ == "__main__":
    main()
