import contextlib
import sys
from collections.abc import AsyncIterator

from alembic import command, config
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from eventia.config.settings import settings


def create_engine(url: str):
    url = str(url)
    use_echo = settings.LOG_DB
    kwargs = {}
    if "sqlite" in url:
        # one aiosqlite connection per session, the file is the shared state
        kwargs = {"connect_args": {"timeout": 15}, "poolclass": NullPool}
    return create_async_engine(
        url,
        echo=use_echo,
        future=True,  # use the sqlalchemy 2.0 classes
        **kwargs,
    )


def generate_test_db_dsn(dsn: str) -> str:
    part_dsn, db_name = str(dsn).rsplit("/", 1)
    return f"{part_dsn}/test_{db_name}"


engine = create_engine(settings.DB_DSN)
if "pytest" in sys.modules:
    engine = create_engine(generate_test_db_dsn(settings.DB_DSN))


def run_upgrade(connection, cfg):
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(run_upgrade, config.Config("alembic.ini"))


async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit=True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    if session_overwrite:
        yield session_overwrite
    else:
        async with async_session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()
