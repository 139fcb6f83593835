from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from laptop_api.api.deps import get_laptop_store
from laptop_api.core.errors import LaptopNotFoundError
from laptop_api.crud.crud_laptop import LaptopStore
from laptop_api.parsers.request import parse_laptop_body, parse_laptop_id
from laptop_api.schemas.laptop import Laptop

router = APIRouter()

# The id is parsed from the raw path rather than a typed path parameter so a
# non-numeric or missing id is a 500, the same as any other unparsable input.
ITEM_PATH = "/{laptop_ref:path}"


@router.post("", response_class=PlainTextResponse)
async def create_laptop(request: Request, store: LaptopStore = Depends(get_laptop_store)) -> PlainTextResponse:
    """Create a laptop from a JSON body."""
    laptop_in = parse_laptop_body(await request.body())
    laptop = await store.insert(laptop_in)
    return PlainTextResponse("Laptop created", headers={"Location": f"{request.url.path}/{laptop.id}"})


@router.get("", response_model=list[Laptop])
async def read_laptops(store: LaptopStore = Depends(get_laptop_store)) -> list[Laptop]:
    """Retrieve all laptops."""
    return [Laptop.model_validate(row) for row in await store.get_all()]


@router.get(ITEM_PATH, response_model=Laptop)
async def read_laptop(request: Request, store: LaptopStore = Depends(get_laptop_store)) -> Laptop:
    """Get laptop by ID."""
    laptop_id = parse_laptop_id(request.url.path)
    laptop = await store.get_by_id(laptop_id)
    if laptop is None:
        raise LaptopNotFoundError(laptop_id)
    return Laptop.model_validate(laptop)


@router.put(ITEM_PATH, response_class=PlainTextResponse)
async def update_laptop(request: Request, store: LaptopStore = Depends(get_laptop_store)) -> PlainTextResponse:
    """Replace every field of a laptop."""
    laptop_id = parse_laptop_id(request.url.path)
    laptop_in = parse_laptop_body(await request.body())
    if not await store.update(laptop_id, laptop_in):
        raise LaptopNotFoundError(laptop_id)
    return PlainTextResponse("Laptop updated")


@router.delete(ITEM_PATH, response_class=PlainTextResponse)
async def delete_laptop(request: Request, store: LaptopStore = Depends(get_laptop_store)) -> PlainTextResponse:
    """Delete a laptop."""
    laptop_id = parse_laptop_id(request.url.path)
    if not await store.delete(laptop_id):
        raise LaptopNotFoundError(laptop_id)
    return PlainTextResponse("Laptop deleted")
