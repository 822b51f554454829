from .validation import MAX_WORD_LEN, ALPHABET, InvalidWordError, encode_word, is_valid_word
from .wordstore import WordHandle, WordStore
from .executioner import (
    EXECUTIONERS, BaseExecutioner, HonestExecutioner, get_executioner, register_executioner,
)

__all__ = [
    "MAX_WORD_LEN", "ALPHABET", "InvalidWordError", "encode_word", "is_valid_word",
    "WordHandle", "WordStore",
    "EXECUTIONERS", "BaseExecutioner", "HonestExecutioner", "get_executioner",
    "register_executioner",
]
