# actionsync Script Encoding
# Percent-encoding of action scripts for JSON transport

from urllib.parse import quote, unquote

# Characters left unescaped by URI component encoding
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_script(text: str) -> str:
    """
    Percent-encode script text as a URI component.

    Newlines, quotes and non-ASCII characters are escaped as UTF-8
    percent sequences.
    """
    return quote(text, safe=_URI_COMPONENT_SAFE, encoding="utf-8")


def decode_script(encoded: str) -> str:
    """Reverse encode_script."""
    return unquote(encoded, encoding="utf-8")
