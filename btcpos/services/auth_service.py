import logging

from btcpos.models.user import User
from btcpos.models.wallet import Wallet
from btcpos.extensions import db
from btcpos.enums import UserRole
from btcpos.exceptions import AuthenticationError, ConflictError, NotFoundError
from flask_jwt_extended import create_access_token
from decimal import Decimal

logger = logging.getLogger(__name__)


class AuthService:
    """Signup, login and token issuing"""

    @staticmethod
    def generate_token(user: User) -> str:
        return create_access_token(
            identity=user.id, additional_claims={"role": user.role.value}
        )

    @staticmethod
    def signup(email: str, password: str, name: str, role: str) -> dict:
        if User.query.filter_by(email=email).first():
            raise ConflictError("User already exists")

        user = User(email=email, name=name, role=UserRole(role))
        user.set_password(password)
        db.session.add(user)
        db.session.flush()

        # Every account gets an empty wallet
        db.session.add(Wallet(user_id=user.id, btc_balance=Decimal("0")))
        db.session.commit()

        logger.info(f"Registered {user.role.value} account {user.id}")
        return {"user": user.to_dict(), "token": AuthService.generate_token(user)}

    @staticmethod
    def login(email: str, password: str) -> dict:
        user = User.query.filter_by(email=email).first()

        if not user or not user.check_password(password):
            raise AuthenticationError("Invalid credentials")

        return {
            "user": {
                "id": user.id,
                "email": user.email,
                "name": user.name,
                "role": user.role.value,
            },
            "token": AuthService.generate_token(user),
        }

    @staticmethod
    def get_user_by_id(user_id: str) -> User:
        user = db.session.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
