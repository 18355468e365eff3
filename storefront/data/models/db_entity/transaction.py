from sqlalchemy import Column, Integer, String, ForeignKey, DECIMAL
from storefront.data.models import Base


class Transaction(Base):
    """A purchase record. Product fields are a snapshot taken at purchase time."""
    __tablename__ = "transactions"

    transaction_id = Column("transactionID", Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), ForeignKey("users.username"), nullable=False, index=True)
    # No FK on product_id: the snapshot outlives any change to the catalog
    product_id = Column("productID", Integer, nullable=False)
    product_name = Column("productName", String, nullable=False)
    price = Column(DECIMAL(18, 2), nullable=False)

    def to_dict(self):
        return {
            "transactionID": self.transaction_id,
            "username": self.username,
            "productID": self.product_id,
            "productName": self.product_name,
            "price": float(self.price),
        }
