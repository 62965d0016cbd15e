from urllib.parse import quote, quote_plus

LMGTFY_URL = "http://lmgtfy.com/?q="
URBAN_DICTIONARY_URL = "http://www.urbandictionary.com/define.php?term="

# characters left alone by encodeURIComponent besides the ones quote() always keeps
_COMPONENT_SAFE = "!*'()"


def encode_component(text: str) -> str:
    """
    percent-encodes a url component the way encodeURIComponent does,
    spaces become %20
    """
    return quote(text, safe=_COMPONENT_SAFE)


def encode_query(text: str) -> str:
    """form encoding for a query value, spaces become +"""
    return quote_plus(text)


def lmgtfy_url(query: str) -> str:
    return LMGTFY_URL + encode_component(query)


def urban_dictionary_url(term: str) -> str:
    return URBAN_DICTIONARY_URL + encode_query(term)
