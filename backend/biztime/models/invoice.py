from datetime import date

from sqlalchemy import Boolean, Date, Float, ForeignKey, String, false, func
from sqlalchemy.orm import Mapped, mapped_column
from biztime.db import Base

class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # cascade fica no banco; a aplicação não apaga invoices por conta própria
    comp_code: Mapped[str] = mapped_column(
        String(50), ForeignKey("companies.code", ondelete="CASCADE"), nullable=False, index=True
    )

    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    add_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today, server_default=func.current_date())
    # só preenchido quando pago
    paid_date: Mapped[date | None] = mapped_column(Date, nullable=True)
