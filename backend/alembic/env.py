# backend/alembic/env.py
from logging.config import fileConfig
import os, sys
from alembic import context

# --- backend/ on PYTHONPATH ---
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

# Application metadata and the same DATABASE_URL the API uses
from inventory.core.db import Base, Database  # <-- critical
# (importing the models fills the metadata)
from inventory import models  # noqa: F401

# Alembic config & logging
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database = Database.from_env()


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    context.configure(
        url=database.url.render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        compare_server_default=False,
        render_as_batch=(database.dialect == "sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""
    with database.engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=False,
            render_as_batch=(database.dialect == "sqlite"),
        )
        with context.begin_transaction():
            context.run_migrations()
    database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
