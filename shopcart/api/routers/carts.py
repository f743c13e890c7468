#shopcart/api/routers/carts.py
from fastapi import APIRouter, Depends, Response

from shopcart.api.deps import get_cart_service, get_current_user, http_error
from shopcart.data.models.user import UserModel
from shopcart.domain.errors import CartError
from shopcart.domain.schemas import CartOut, ItemIn
from shopcart.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return CartOut.model_validate(svc.get_cart_by_user(user))
    except CartError as e:
        raise http_error(e)


@router.post("", response_model=CartOut)
def add_item(
    payload: ItemIn,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        cart = svc.add_product_to_cart(user, payload.product_id, payload.quantity)
    except CartError as e:
        raise http_error(e)
    return CartOut.model_validate(cart)


@router.put("", response_model=CartOut)
def update_item(
    payload: ItemIn,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        cart = svc.update_product_in_cart(user, payload.product_id, payload.quantity)
    except CartError as e:
        raise http_error(e)
    return CartOut.model_validate(cart)


@router.delete("/items/{product_id}", status_code=204)
def remove_item(
    product_id: str,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        svc.delete_product_from_cart(user, product_id)
    except CartError as e:
        raise http_error(e)
    return Response(status_code=204)
