import logging
from abc import ABC, abstractmethod

from flask_login import current_user, login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from evault.errors import AuthError, ValidationFailure
from evault.extensions import bcrypt, db
from evault.models.user import User

logger = logging.getLogger(__name__)


class AuthProvider(ABC):
    """Sign-in, sign-up and "who is this" for the workflows."""

    @abstractmethod
    def sign_in(self, email, password):
        ...

    @abstractmethod
    def sign_up(self, email, password):
        ...

    @abstractmethod
    def get_current_user(self):
        ...

    @abstractmethod
    def sign_out(self):
        ...


class FlaskLoginAuthProvider(AuthProvider):

    def sign_in(self, email, password):
        if not email or not password:
            raise ValidationFailure("Email and password are required")
        user = User.query.filter_by(email=email.strip().lower()).first()
        if user is None or not bcrypt.check_password_hash(user.password, password):
            logger.info("Failed sign-in for %s", email)
            raise AuthError("Invalid login credentials")
        login_user(user)
        return user.id

    def sign_up(self, email, password):
        if not email or not password:
            raise ValidationFailure("Email and password are required")
        email = email.strip().lower()
        if User.query.filter_by(email=email).first():
            raise AuthError("User already registered")
        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")
        new_user = User(email=email, password=hashed_password)
        try:
            db.session.add(new_user)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise AuthError("Could not create account") from e
        logger.info("Registered user %s", new_user.id)
        return new_user.id

    def get_current_user(self):
        if not current_user or not current_user.is_authenticated:
            raise AuthError()
        return current_user.id

    def sign_out(self):
        logout_user()
