from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text, CheckConstraint
from core.database import Base

class Organization(Base):
    __tablename__ = "organizations"

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text(), nullable=False)
    description: Mapped[str] = mapped_column(Text(), nullable=False)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text(), nullable=True)

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_organizations_num_employees"),
    )
