"""Localized messages returned in 404 responses."""

DEFAULT_LOCALE = "en"

NOT_FOUND = {
    "en": {
        "article": "Article does not exist",
        "user": "User does not exist",
    },
    "ko": {
        "article": "Article 이 존재하지 않습니다.",
        "user": "User 가 존재하지 않습니다.",
    },
}


def not_found(entity: str, locale: str = DEFAULT_LOCALE) -> str:
    """Message for a missing ``entity`` ("article" or "user").

    ``locale`` may carry a region ("ko_KR", "en-US"); only the language part
    is used. Unknown languages fall back to English.
    """
    language = locale.replace("-", "_").split("_")[0].lower()
    table = NOT_FOUND.get(language, NOT_FOUND[DEFAULT_LOCALE])
    return table[entity]
