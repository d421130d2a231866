import logging
import threading
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from database import create_engine_lock, open_session
from errors import DuplicateEmail, InvalidCredentials
from models import Role, User
from utils.passwords import check_password, hash_password

logger = logging.getLogger(__name__)


class UserStore:
    """
    Account records and password verification

    Emails are matched exactly (case-sensitive). Plaintext passwords are
    hashed before they reach the table and never leave this class.
    """

    def __init__(
        self,
        engine: Engine,
        bcrypt_rounds: int = 10,
        lock: Optional[threading.Lock] = None,
    ):
        self.engine = engine
        self.bcrypt_rounds = bcrypt_rounds
        self._lock = lock if lock is not None else create_engine_lock()

    def register(
        self,
        email: str,
        password: str,
        first_name: str = "",
        role: Optional[Role] = None,
    ) -> User:
        """
        Create a new account

        Raises:
            DuplicateEmail: If the email is already registered
        """
        # Hash outside the lock, it is the slow part
        password_hash = hash_password(password, self.bcrypt_rounds)

        with open_session(self.engine, self._lock) as session:
            existing = session.exec(select(User).where(User.email == email)).first()
            if existing:
                logger.info("Registration rejected: email already registered")
                raise DuplicateEmail()

            user = User(
                email=email,
                password_hash=password_hash,
                first_name=first_name or "",
                role=role or Role.USER,
            )
            session.add(user)
            session.commit()
            session.refresh(user)

        logger.info(f"Registered user {user.id} with role {user.role.value}")
        return user

    def verify(self, email: str, password: str) -> User:
        """
        Check credentials and return the matching user

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
        """
        user = self.find_by_email(email)
        if not user or not check_password(password, user.password_hash):
            raise InvalidCredentials()
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        with open_session(self.engine, self._lock) as session:
            return session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with open_session(self.engine, self._lock) as session:
            return session.exec(select(User).where(User.email == email)).first()

    def list_all(self) -> List[User]:
        with open_session(self.engine, self._lock) as session:
            return list(session.exec(select(User).order_by(User.id)).all())
