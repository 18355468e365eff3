from sqlalchemy import Column, Integer, String, DECIMAL
from sqlalchemy.orm import relationship

from storefront.data.models import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(DECIMAL(18, 2), nullable=False)

    detail = relationship("ProductDetail", back_populates="product", uselist=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": float(self.price),
        }
