# importing every model registers its table on Base.metadata

from shopcart.data.models.user import UserModel
from shopcart.data.models.cart import CartModel
from shopcart.data.models.cart_item import CartItemModel

__all__ = ["UserModel", "CartModel", "CartItemModel"]
