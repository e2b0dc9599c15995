"""Translation endpoints (demo).

GET  /api/v1/translation/languages - supported languages
POST /api/v1/translation/translate - bracket-marked echo of the input text
"""

from fastapi import APIRouter

from app.schemas import LanguagesResponse, TranslateRequest, TranslateResponse
from app.services.translation import get_supported_languages, translate_text

router = APIRouter()


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    return LanguagesResponse(data=get_supported_languages())


@router.post("/translate", response_model=TranslateResponse)
async def translate(request: TranslateRequest | None = None) -> TranslateResponse:
    """Translate text between two supported languages."""
    request = request or TranslateRequest()
    return TranslateResponse(
        data=translate_text(request.text, request.from_lang, request.to_lang),
    )
