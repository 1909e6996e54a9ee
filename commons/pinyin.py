"""
Chinese to pinyin conversion.
"""

from typing import Optional

from pypinyin import Style, lazy_pinyin


def pinyin(text: Optional[str]) -> Optional[str]:
    """
    Full pinyin of a Chinese string: lower case, no tone marks, ü written as v.
    Non-Chinese characters are kept as they are.

    Examples:
        >>> pinyin("中国")
        'zhongguo'
        >>> pinyin("绿A")
        'lvA'
    """
    if text is None or not text.strip():
        return text
    return ''.join(lazy_pinyin(text, style=Style.NORMAL, v_to_u=False))


def pinyin_head_char(text: Optional[str]) -> Optional[str]:
    """
    Upper-case initials of a Chinese string; anything that is not a letter is dropped.

    Examples:
        >>> pinyin_head_char("中华人民共和国")
        'ZHRMGHG'
    """
    if text is None or not text.strip():
        return text
    letters = ''.join(lazy_pinyin(text, style=Style.FIRST_LETTER))
    return ''.join(ch.upper() for ch in letters if ch.isascii() and ch.isalpha())
