from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base, AuditMixin


class City(Base, AuditMixin):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)

    theatres = relationship("Theatre", back_populates="city")

    def __repr__(self) -> str:
        return f"<City(id={self.id}, name={self.name})>"
