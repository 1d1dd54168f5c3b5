"""
Text sanitizer for the PDF rendering surface.

Replaces characters that the HTML-to-PDF renderer draws badly with ASCII
equivalents or character references.
"""

from typing import Dict, Optional

# Applied before the code point fallback.
UNICODE_REPLACEMENTS: Dict[str, str] = {
    # Arrows
    "→": "->",
    "←": "<-",
    "↑": "^",
    "↓": "v",
    "↔": "<->",
    "⟶": "->",
    "⟵": "<-",
    # Mathematical symbols
    "≠": "&ne;",
    "≤": "&le;",
    "≥": "&ge;",
    "±": "&plusmn;",
    "×": "&times;",
    "÷": "&divide;",
    "∞": "&infin;",
    "√": "&radic;",
    # Currency and symbols
    "€": "&euro;",
    "£": "&pound;",
    "¥": "&yen;",
    "©": "&copy;",
    "®": "&reg;",
    "™": "&trade;",
    "§": "&sect;",
    # Punctuation
    "“": "&ldquo;",
    "”": "&rdquo;",
    "‘": "&lsquo;",
    "’": "&rsquo;",
    "…": "...",
    "–": "-",
    # Greek letters
    "α": "&alpha;",
    "β": "&beta;",
    "γ": "&gamma;",
    "δ": "&delta;",
    "π": "&pi;",
    "Ω": "&Omega;",
    # Miscellaneous
    "°": "&deg;",
    "µ": "&micro;",
    "¼": "&frac14;",
    "½": "&frac12;",
    "¾": "&frac34;",
}

SAFE_DASHES = frozenset({0x2010, 0x2011, 0x2012})


def is_known_safe(code_point: int) -> bool:
    """Return True for code points above Latin-1 that render without conversion."""
    if 0x0100 <= code_point <= 0x024F:  # Latin Extended-A and -B
        return True
    return code_point in SAFE_DASHES


def sanitize_text(text: Optional[str]) -> Optional[str]:
    """
    Make text safe for the PDF rendering surface.

    Args:
        text: Arbitrary text

    Returns:
        Text with the replacement table applied and every remaining character
        above U+00FF (outside the safe ranges) turned into ``&#NNNN;``
    """
    if not text:
        return text

    for symbol, replacement in UNICODE_REPLACEMENTS.items():
        if symbol in text:
            text = text.replace(symbol, replacement)

    return "".join(
        f"&#{ord(char)};" if ord(char) > 255 and not is_known_safe(ord(char)) else char
        for char in text
    )
