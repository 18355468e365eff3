from sqlalchemy import Column, String
from storefront.data.models import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(100), primary_key=True)
    email = Column(String(150), unique=True, nullable=False, index=True)
    # Stored in the "password" column as a salted hash
    hashed_password = Column("password", String(255), nullable=False)
