from __future__ import annotations
from sqlalchemy import Integer, Numeric, Text, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class Position(Base):
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text(), nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    equity: Mapped[float | None] = mapped_column(Numeric(asdecimal=False), nullable=True)
    # rows go away with their organization, enforced by the store
    organization_handle: Mapped[str] = mapped_column(
        String(25), ForeignKey("organizations.handle", ondelete="CASCADE"), index=True, nullable=False
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_positions_salary"),
        CheckConstraint("equity <= 1.0", name="ck_positions_equity"),
    )
