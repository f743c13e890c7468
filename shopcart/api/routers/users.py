from fastapi import APIRouter, Depends
from shopcart.api.deps import get_user_service, http_error
from shopcart.domain.errors import CartError
from shopcart.domain.schemas import AddressIn, AddressOut, UserCreate, UserRead
from shopcart.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    try:
        return service.create_user(payload.email, payload.name, payload.address)
    except CartError as e:
        raise http_error(e)

@router.get("/{email}", response_model=UserRead)
def get_user(email: str, service: UserService = Depends(get_user_service)):
    try:
        return service.get_user(email)
    except CartError as e:
        raise http_error(e)

@router.put("/{email}/address", response_model=AddressOut)
def set_address(email: str, payload: AddressIn, service: UserService = Depends(get_user_service)):
    try:
        user = service.get_user(email)
    except CartError as e:
        raise http_error(e)
    return {"address": service.set_address(user, payload.address)}
