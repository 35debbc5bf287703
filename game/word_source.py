"""
Word source - target word and hint for each level

The real word generator lives outside the game. Anything implementing
get_word(level, language, length) can be plugged in; when it is missing,
raises, or returns something unusable, a built-in word is used instead.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

from game.exceptions import WordSourceError
from utils.constants import LANG_EN, LANG_PT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordData:
    word: str
    hint: str


class WordSource(Protocol):
    def get_word(self, level: int, language: str, length: int) -> WordData:
        ...


FALLBACK_WORDS = {
    LANG_EN: [
        WordData("CODE", "Instructions for a computer"),
        WordData("REACT", "A JavaScript library for UIs"),
        WordData("MAZE", "A complex network of paths"),
        WordData("LOGIC", "Reasoning conducted via validation"),
        WordData("PIXEL", "Tiny dot on a screen"),
        WordData("ALGO", "Short for algorithm"),
        WordData("DATA", "Facts and statistics"),
        WordData("NODE", "A point in a network"),
        WordData("LOOP", "Repeating sequence"),
        WordData("STACK", "LIFO data structure"),
    ],
    LANG_PT: [
        WordData("CODIGO", "Instruções para um computador"),
        WordData("REACT", "Uma biblioteca JavaScript para UIs"),
        WordData("LABIRINTO", "Uma rede complexa de caminhos"),
        WordData("LOGICA", "Raciocínio conduzido via validação"),
        WordData("PIXEL", "Ponto minúsculo em uma tela"),
        WordData("DADOS", "Fatos e estatísticas"),
        WordData("REDE", "Conexão de computadores"),
        WordData("LOOP", "Sequência de repetição"),
        WordData("PILHA", "Estrutura de dados LIFO"),
        WordData("NUVEM", "Computação remota"),
    ],
}


def normalize_word(data):
    """
    Validate and upper-case a collaborator payload

    Accepts a WordData or a {"word", "hint"} mapping.

    Raises:
        WordSourceError: if the word is missing or has non A-Z characters
    """
    if isinstance(data, dict):
        word, hint = data.get('word'), data.get('hint', '')
    else:
        word, hint = getattr(data, 'word', None), getattr(data, 'hint', '')

    if not isinstance(word, str):
        raise WordSourceError(f"word missing from {data!r}")

    word = word.strip().upper()
    if not word or not all('A' <= ch <= 'Z' for ch in word):
        raise WordSourceError(f"unusable word {word!r}")

    return WordData(word, str(hint or ''))


class FallbackWordSource:
    """Built-in word tables"""
    def __init__(self, rng=None, words=None):
        self.rng = rng or random
        self.words = words or FALLBACK_WORDS

    def get_word(self, level, language, length):
        table = self.words.get(language) or self.words[LANG_EN]
        sized = [w for w in table if len(w.word) == length]
        return self.rng.choice(sized or table)


class WordProvider:
    """
    Fetches the level word, falling back to the built-in tables

    Args:
        source: Optional external WordSource
        fallback: Source used when the external one is absent or fails
    """
    def __init__(self, source: Optional[WordSource] = None, fallback=None, rng=None):
        self.source = source
        self.fallback = fallback or FallbackWordSource(rng)
        self.used_fallback = False

    def fetch(self, level, language, length):
        self.used_fallback = False

        if self.source is None:
            logger.info("No word source configured, using fallback words")
            return self._fallback(level, language, length)

        try:
            return normalize_word(self.source.get_word(level, language, length))
        except Exception as e:
            logger.warning("Word source failed (%s), using fallback word", e)
            return self._fallback(level, language, length)

    def _fallback(self, level, language, length):
        self.used_fallback = True
        return normalize_word(self.fallback.get_word(level, language, length))
