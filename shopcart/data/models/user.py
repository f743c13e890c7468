from sqlalchemy import Column, Integer, String
from shopcart.data.database import Base

class UserModel(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    address = Column(String(500), nullable=True)
