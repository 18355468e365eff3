from sqlalchemy import Column, Integer, String, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from storefront.data.models import Base


class ProductDetail(Base):
    __tablename__ = "details"

    id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    category = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    stock = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="detail")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_details_stock_non_negative"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "description": self.description,
            "stock": self.stock,
        }
