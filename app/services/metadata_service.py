"""
Token metadata URI
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.services.errors import InvalidEventData, NotAuthorized
from app.services.repositories import StateRepo

logger = logging.getLogger(__name__)

class MetadataService:
    """Service for the registry-wide base URI"""
    
    @staticmethod
    def get_token_uri(db: Session, token_id: int) -> Optional[str]:
        """Every token id, minted or not, resolves to the base URI"""
        return StateRepo.base_uri(db)
    
    @staticmethod
    def set_base_uri(db: Session, caller: str, new_uri: str) -> bool:
        if caller != settings.DEPLOYER_PRINCIPAL:
            raise NotAuthorized("Only the deployer can change the base URI")
        
        if not new_uri or len(new_uri) > settings.MAX_BASE_URI_LENGTH:
            raise InvalidEventData("Base URI must be 1 to %d characters" % settings.MAX_BASE_URI_LENGTH)
        
        state = StateRepo.get_or_create(db)
        state.base_uri = new_uri
        db.commit()
        
        logger.info(f"Base URI updated to {new_uri}")
        return True
