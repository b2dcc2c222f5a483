from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from biztime.db import Base

class Company(Base):
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
