"""
Credential routes
"""

from fastapi import APIRouter, Depends, HTTPException

from ..models import CredentialStatus, CredentialUpdate
from ..services.session import AnalysisSession
from .deps import get_session

router = APIRouter(prefix="/credential", tags=["credential"])


def _status(session: AnalysisSession) -> CredentialStatus:
    return CredentialStatus(
        configured=session.credential_provider.has_credential(),
        credential_required=session.credential_required,
    )


@router.get("", response_model=CredentialStatus)
async def get_credential_status(session: AnalysisSession = Depends(get_session)):
    """Whether an API key is available and whether the UI must ask for one"""
    return _status(session)


@router.post("", response_model=CredentialStatus)
async def set_credential(update: CredentialUpdate, session: AnalysisSession = Depends(get_session)):
    """Supply a new API key; it is used from the next analysis run"""
    provider = session.credential_provider
    if not hasattr(provider, "set_credential"):
        raise HTTPException(status_code=501, detail="The configured credential provider does not accept keys")
    if not update.api_key.strip():
        raise HTTPException(status_code=400, detail="API key must not be empty")

    provider.set_credential(update.api_key)
    session.select_credential()
    return _status(session)
