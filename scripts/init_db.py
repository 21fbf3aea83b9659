from __future__ import annotations

import importlib

from dotenv import load_dotenv

from punchpro.config import get_settings_module
from punchpro.container import build_container
from punchpro.core.logging_config import configure_logging
from punchpro.database.bootstrap import apply_schema, list_tables
from punchpro.database.seed import seed_demo_data


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings=settings)
    if container.conn is None:
        raise SystemExit("STORAGE_BACKEND is not 'mysql'; nothing to initialize")

    apply_schema(container.conn)
    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container)

    cfg = container.conn.config
    tables = list_tables(container.conn)
    print(f"OK: Applied schema.sql -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
