import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

import eventia.cart.repository.orm_models  # noqa: F401
import eventia.catalog.repository.orm_models  # noqa: F401
import eventia.moderation.repository.orm_models  # noqa: F401
from eventia.config.database import create_engine
from eventia.config.settings import settings
from eventia.models import BaseModel

config = context.config

if config.config_file_name is not None and config.attributes.get("connection") is None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=settings.DB_DSN,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=settings.DB_DSN.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = create_engine(settings.DB_DSN)
    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await engine.dispose()


def run_migrations_online() -> None:
    # eventia.config.database.init_db hands over an open connection
    connection = config.attributes.get("connection")
    if connection is not None:
        do_run_migrations(connection)
        return
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
