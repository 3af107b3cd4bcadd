"""Script Sessions — one-shot async DB sessions for code that runs outside FastAPI.

Invariants:
    - Meant for scripts (seed command), not request handling
    - The engine lives exactly as long as the session block and is disposed on exit
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine


@asynccontextmanager
async def script_session(database_url: str) -> AsyncGenerator[AsyncSession, None]:
    """Open an engine, yield one session, then tear both down."""
    engine = create_async_engine(database_url, echo=False)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with factory() as session:
            yield session
    finally:
        await engine.dispose()
