from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from laptop_api.db.base import Base


class Laptop(Base):
    """SQLAlchemy model for a laptop.

    ``price`` is free text on purpose; clients send and get back whatever
    formatting they used.
    """

    __tablename__ = "laptops"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text(), nullable=False)
    description: Mapped[str] = mapped_column(Text(), nullable=False)
    price: Mapped[str] = mapped_column(Text(), nullable=False)
    processor: Mapped[str] = mapped_column(Text(), nullable=False)
    ram: Mapped[str] = mapped_column(Text(), nullable=False)
    storage: Mapped[str] = mapped_column(Text(), nullable=False)
    display: Mapped[str] = mapped_column(Text(), nullable=False)
    os: Mapped[str] = mapped_column(Text(), nullable=False)
    graphics: Mapped[str] = mapped_column(Text(), nullable=False)
