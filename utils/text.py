"""
Localized UI strings (English / Portuguese)
"""

from utils.constants import LANG_EN, LANG_PT, DEFAULT_LANGUAGE

UI_TEXT = {
    LANG_EN: {
        'title': "Labyrinth",
        'level': "Level",
        'score': "Score",
        'hint': "Hint",
        'hunter': "HUNTER ACTIVE",
        'loading': "Generating Level",
        'complete': "Level Complete!",
        'found': "Word found:",
        'next': "Enter: Next Level",
        'controls': "Move: Arrows/WASD | Shoot: Space",
        'restart': "R: Restart Game",
        'select_lang': "Select Language",
        'lang_keys': "E: English | P: Português",
        'error': "Could not build the level",
        'shop': "Merchant",
        'poor': "Not enough points",
        'items': {
            'shield': "Shield",
            'sword': "Sword",
            'pistol': "Pistol",
            'drill': "Drill",
        },
        'desc': {
            'shield': "Blocks one hit",
            'sword': "Kill enemy on contact",
            'pistol': "Ranged kill",
            'drill': "Break through walls",
        },
    },
    LANG_PT: {
        'title': "Labirinto",
        'level': "Nível",
        'score': "Pontos",
        'hint': "Dica",
        'hunter': "CAÇADOR ATIVO",
        'loading': "Gerando Nível",
        'complete': "Nível Completo!",
        'found': "Palavra encontrada:",
        'next': "Enter: Próximo Nível",
        'controls': "Mover: Setas/WASD | Atirar: Espaço",
        'restart': "R: Reiniciar Jogo",
        'select_lang': "Selecione o Idioma",
        'lang_keys': "E: English | P: Português",
        'error': "Não foi possível criar o nível",
        'shop': "Mercador",
        'poor': "Pontos insuficientes",
        'items': {
            'shield': "Escudo",
            'sword': "Espada",
            'pistol': "Pistola",
            'drill': "Broca",
        },
        'desc': {
            'shield': "Bloqueia um golpe",
            'sword': "Mata o inimigo no contato",
            'pistol': "Abate à distância",
            'drill': "Atravessa paredes",
        },
    },
}


def get_text(language):
    """String table for a language (English when unknown)"""
    return UI_TEXT.get(language, UI_TEXT[DEFAULT_LANGUAGE])
