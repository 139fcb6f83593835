from typing import AsyncGenerator

from fastapi import Request

from laptop_api.crud.crud_laptop import CRUDLaptop, LaptopStore


async def get_laptop_store(request: Request) -> AsyncGenerator[LaptopStore, None]:
    """FastAPI dependency that yields a laptop store bound to a fresh session.

    The session, and the connection behind it, is closed when the request ends.
    """
    async with request.app.state.sessionmaker() as session:
        yield CRUDLaptop(session)
