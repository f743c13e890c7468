# shopcart/api/deps.py
from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from shopcart.data.database import get_db
from shopcart.data.models.user import UserModel
from shopcart.domain.errors import CartError
from shopcart.repos.cart_repo import CartRepo
from shopcart.services.cart_service import CartService
from shopcart.services.lock_service import LockService
from shopcart.services.product_client import ProductClient
from shopcart.services.user_service import UserService


def http_error(e: CartError) -> HTTPException:
    headers = {"Retry-After": "1"} if e.retryable else None
    return HTTPException(status_code=e.status_code, detail=e.message, headers=headers)


def get_cart_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(
        store=CartRepo(db),
        catalog=ProductClient(),
        lock_service=LockService(),
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_current_user(
    email: str = Query(..., min_length=3),
    users: UserService = Depends(get_user_service),
) -> UserModel:
    # stands in for authentication: the caller names the user by email
    try:
        return users.get_user(email)
    except CartError as e:
        raise http_error(e)
