from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.soccer_api.soccer_api.database.bootstrap import init_schema, seed_demo_data
from src.soccer_api.soccer_api.main import create_app, db_label, get_container


def main() -> None:
    app = create_app()
    init_schema(app)
    seed_demo_data(
        app,
        get_container(app),
        username=app.config["DEMO_USERNAME"],
        password=app.config["DEMO_PASSWORD"],
    )
    print(f"OK: seeded database -> {db_label(app.config['SQLALCHEMY_DATABASE_URI'])}")


if __name__ == "__main__":
    main()
