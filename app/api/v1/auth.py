from fastapi import APIRouter

from app.core.auth.service import AuthService
from app.core.auth.schemas import TokenRequest, TokenResponse

router = APIRouter(tags=["authentication"])

@router.post("/jwt", response_model=TokenResponse)
async def issue_token(identity: TokenRequest):
    """
    Emitir token de sesión para la identidad enviada

    **Body:** cualquier objeto de identidad (al menos el email)
    ```json
        {
            "email": "user@example.com"
        }
    ```

    **Returns:**
    - Token JWT con los mismos claims, válido por 24 horas
    """
    claims = identity.model_dump(exclude_none=True)
    return TokenResponse(token=AuthService.create_access_token(data=claims))
