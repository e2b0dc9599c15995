"""Tests for the demo translation endpoints."""

import pytest
from httpx import AsyncClient

from app.services.translation import DEMO_CONFIDENCE, translate_text


@pytest.mark.asyncio
async def test_languages_lists_ten_indian_languages(client: AsyncClient):
    response = await client.get("/api/v1/translation/languages")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    codes = [lang["code"] for lang in data["data"]]
    assert codes == ["hi", "en", "ta", "te", "bn", "mr", "gu", "kn", "ml", "pa"]
    assert data["data"][0] == {"code": "hi", "name": "Hindi", "nativeName": "हिन्दी"}


@pytest.mark.asyncio
async def test_translate_wraps_text_with_language_pair(client: AsyncClient):
    response = await client.post(
        "/api/v1/translation/translate",
        json={"text": "hello", "fromLang": "en", "toLang": "hi"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"] == {
        "translatedText": "[Translated from en to hi] hello",
        "confidence": 0.95,
        "originalText": "hello",
        "fromLanguage": "en",
        "toLanguage": "hi",
    }


@pytest.mark.asyncio
async def test_translate_without_body_still_succeeds(client: AsyncClient):
    response = await client.post("/api/v1/translation/translate")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["translatedText"] == "[Translated from  to ] "
    assert data["originalText"] == data["fromLanguage"] == data["toLanguage"] == ""


@pytest.mark.asyncio
async def test_translate_rejects_non_string_text(client: AsyncClient):
    response = await client.post(
        "/api/v1/translation/translate",
        json={"text": {"nested": True}, "fromLang": "en", "toLang": "hi"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert body["details"]


def test_translate_text_keeps_unicode_verbatim():
    result = translate_text("प्याज़ का भाव", "hi", "ta")
    assert result.translated_text == "[Translated from hi to ta] प्याज़ का भाव"
    assert result.confidence == DEMO_CONFIDENCE
