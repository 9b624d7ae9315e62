# fastapi dependency injection
# provides the entry store built in the app lifespan

from fastapi import Request

from aceso.services.entry_store import EntryStore


async def get_entry_store(request: Request) -> EntryStore:
    """the process-wide entry store. tests override this with a fresh store"""
    return request.app.state.entry_store
