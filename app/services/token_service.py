"""
Token ownership and transfer
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.services.errors import NotAuthorized, NotTokenOwner
from app.services.repositories import StateRepo, TokenRepo

logger = logging.getLogger(__name__)

class TokenService:
    """Service for bearer-token ownership"""
    
    @staticmethod
    def get_owner(db: Session, token_id: int) -> Optional[str]:
        token = TokenRepo.get_by_id(db, token_id)
        return token.owner if token else None
    
    @staticmethod
    def get_last_token_id(db: Session) -> int:
        return StateRepo.last_token_id(db)
    
    @staticmethod
    def transfer(
        db: Session,
        caller: str,
        token_id: int,
        sender: str,
        recipient: str
    ) -> bool:
        """Move a token from sender to recipient.
        
        The caller must be the declared sender, and the sender must be the
        current owner. The token's event link and attendance records stay
        as they are.
        """
        if caller != sender:
            raise NotAuthorized("Caller must be the sender")
        
        token = TokenRepo.get_by_id(db, token_id)
        if not token or token.owner != sender:
            raise NotTokenOwner(f"{sender} does not own token {token_id}")
        
        token.owner = recipient
        db.commit()
        
        logger.info(f"Token {token_id} transferred from {sender} to {recipient}")
        return True
