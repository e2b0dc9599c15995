"""Schemas for the translation endpoints (/api/v1/translation)."""

from pydantic import BaseModel, Field


class Language(BaseModel):
    code: str
    name: str
    native_name: str = Field(alias="nativeName")

    model_config = {"populate_by_name": True}


class LanguagesResponse(BaseModel):
    success: bool = True
    data: list[Language]


class TranslateRequest(BaseModel):
    """Request body for POST /api/v1/translation/translate.

    Fields are not validated; missing values translate as empty strings.
    """

    text: str = ""
    from_lang: str = Field(default="", alias="fromLang")
    to_lang: str = Field(default="", alias="toLang")

    model_config = {"populate_by_name": True}


class Translation(BaseModel):
    translated_text: str = Field(alias="translatedText")
    confidence: float = Field(ge=0, le=1)
    original_text: str = Field(alias="originalText")
    from_language: str = Field(alias="fromLanguage")
    to_language: str = Field(alias="toLanguage")

    model_config = {"populate_by_name": True}


class TranslateResponse(BaseModel):
    success: bool = True
    data: Translation
