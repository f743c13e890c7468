#shopcart/data/models/cart.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from shopcart.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    # one cart per owner
    email = Column(String(254), nullable=False, unique=True, index=True)

    version = Column(Integer, nullable=False, default=1)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.position",
    )
