# ============================================================================
# FILE: tubeshare/services/user_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from tubeshare.db.models.user import User
from tubeshare.db.models.engagement import WatchLater
from tubeshare.db.models import video, comment  # noqa: F401  mappers referenced by USER_GRAPH
from tubeshare.schemas.user import RegisterRequest
from tubeshare.core.exceptions import AuthError, ConflictError
from tubeshare.core.security import (
    get_password_hash,
    verify_password,
    decode_access_token,
)
import logging

logger = logging.getLogger(__name__)

# Relations loaded with every user returned by auth and user endpoints
USER_GRAPH = (
    selectinload(User.videos),
    selectinload(User.subscribed_by),
    selectinload(User.subscribing),
    selectinload(User.watch_later).selectinload(WatchLater.video),
    selectinload(User.watch_later).selectinload(WatchLater.user),
    selectinload(User.video_likes),
)

SUBSCRIPTION_GRAPH = (
    selectinload(User.videos),
    selectinload(User.subscribed_by),
    selectinload(User.subscribing),
)

class UserService:
    """Service layer for accounts and subscriptions"""
    
    def create_user(self, db: Session, user_data: RegisterRequest) -> User:
        """Create a new user account; raises ConflictError on duplicate email"""
        hashed_password = get_password_hash(user_data.password)
        try:
            user = User(
                first_name=user_data.first_name,
                last_name=user_data.last_name,
                email=user_data.email,
                password=hashed_password,
                image=user_data.image,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.id}")
            return user
        except IntegrityError:
            db.rollback()
            logger.warning("Registration rejected: email already registered")
            raise ConflictError("Email already registered")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise
    
    def get_user(self, db: Session, user_id: int) -> Optional[User]:
        """Get user by id with the full relation graph"""
        return db.query(User).options(*USER_GRAPH).filter(User.id == user_id).first()
    
    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).options(*USER_GRAPH).filter(User.email == email).first()
    
    def list_users(self, db: Session) -> List[User]:
        return db.query(User).options(*USER_GRAPH).order_by(User.id).all()
    
    def list_users_to_subscribe(self, db: Session, user_id: int) -> List[User]:
        """Everyone except the given user"""
        return db.query(User).filter(User.id != user_id).order_by(User.id).all()
    
    def authenticate_user(self, db: Session, email: str, password: str) -> User:
        """
        Check credentials. Raises AuthError with the same message whether the
        email is unknown or the password is wrong.
        """
        user = self.get_user_by_email(db, email)
        if not user or not verify_password(password, user.password):
            raise AuthError("User or password invalid")
        return user
    
    def get_user_from_token(self, db: Session, token: Optional[str]) -> User:
        """Resolve a token to its user with the full relation graph"""
        payload = decode_access_token(token)
        user = self.get_user(db, payload.id)
        if user is None:
            raise AuthError("User not found")
        return user
    
    def subscribe(self, db: Session, user: User, subscribe_id: int) -> Optional[User]:
        """
        Connect the subscription edge user -> target.
        Returns None if the target does not exist; an existing edge is left as is.
        """
        target = db.get(User, subscribe_id)
        if target is None:
            return None
        
        try:
            if target not in user.subscribing:
                user.subscribing.append(target)
                db.commit()
                logger.info(f"User {user.id} subscribed to {subscribe_id}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error subscribing: {e}")
            raise
        
        return db.query(User).options(*SUBSCRIPTION_GRAPH).filter(User.id == user.id).first()

# Create singleton instance
user_service = UserService()
