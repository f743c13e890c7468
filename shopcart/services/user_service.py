from sqlalchemy.orm import Session
from shopcart.data.models.user import UserModel
from shopcart.domain.errors import ConflictError, NotFoundError, EMAIL_TAKEN, USER_NOT_FOUND
from shopcart.repos.user_repo import UserRepo
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.repo.get_by_email(email)

    def get_user(self, email: str) -> UserModel:
        user = self.repo.get_by_email(email)
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    def create_user(self, email: str, name: str, address: str | None = None) -> UserModel:
        if self.repo.get_by_email(email):
            raise ConflictError(EMAIL_TAKEN)

        created = self.repo.create_user(UserModel(email=email, name=name, address=address))
        logger.info("Registered user", user_id=created.id, email=email)
        return created

    def set_address(self, user: UserModel, new_address: str) -> str:
        user.address = new_address
        saved = self.repo.save(user)
        logger.info("Address updated", email=saved.email)
        return saved.address
