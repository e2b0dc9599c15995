"""Translation service (demo).

No translation engine is wired in: the "translation" wraps the source text
in a marker naming the language pair, with a fixed confidence. The language
catalogue lists the Indian languages the product targets.
"""

from app.schemas import Language, Translation

DEMO_CONFIDENCE = 0.95

SUPPORTED_LANGUAGES: list[Language] = [
    Language(code="hi", name="Hindi", native_name="हिन्दी"),
    Language(code="en", name="English", native_name="English"),
    Language(code="ta", name="Tamil", native_name="தமிழ்"),
    Language(code="te", name="Telugu", native_name="తెలుగు"),
    Language(code="bn", name="Bengali", native_name="বাংলা"),
    Language(code="mr", name="Marathi", native_name="मराठी"),
    Language(code="gu", name="Gujarati", native_name="ગુજરાતી"),
    Language(code="kn", name="Kannada", native_name="ಕನ್ನಡ"),
    Language(code="ml", name="Malayalam", native_name="മലയാളം"),
    Language(code="pa", name="Punjabi", native_name="ਪੰਜਾਬੀ"),
]


def get_supported_languages() -> list[Language]:
    return list(SUPPORTED_LANGUAGES)


def translate_text(text: str, from_lang: str, to_lang: str) -> Translation:
    """Produce the demo translation of `text`.

    Example:
        translate_text("hello", "en", "hi").translated_text
        -> "[Translated from en to hi] hello"
    """
    return Translation(
        translated_text=f"[Translated from {from_lang} to {to_lang}] {text}",
        confidence=DEMO_CONFIDENCE,
        original_text=text,
        from_language=from_lang,
        to_language=to_lang,
    )
