from pydantic import BaseModel, ConfigDict, StrictStr


class LaptopBase(BaseModel):
    id: int | None = None
    name: StrictStr
    description: StrictStr
    price: StrictStr
    processor: StrictStr
    ram: StrictStr
    storage: StrictStr
    display: StrictStr
    os: StrictStr
    graphics: StrictStr


class LaptopCreate(LaptopBase):
    """Request body for create and full-replace update. Any ``id`` sent is ignored."""

    def column_values(self) -> dict[str, str]:
        return self.model_dump(exclude={"id"})


class Laptop(LaptopBase):
    model_config = ConfigDict(from_attributes=True)
