from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for Client table."""
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, index=True)
    last_name: Mapped[str] = mapped_column(Text, index=True)
    email: Mapped[str] = mapped_column(String(255), index=True)
    personal_id: Mapped[str] = mapped_column(String(11))
    mobile_number: Mapped[str] = mapped_column(Text)
    profile_photo: Mapped[str] = mapped_column(Text)
