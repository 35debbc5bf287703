"""
UI Manager - draws the maze, HUD and the menu/shop screens
"""

import numpy as np
import pygame

from game.game_state import GameState
from game.shop import can_afford, get_price
from utils.colors import (
    COLOR_BG, COLOR_PANEL_BG, COLOR_WALL, COLOR_PATH,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_TEXT_ERROR,
    COLOR_PLAYER, COLOR_ENEMY, COLOR_LETTER, COLOR_LETTER_TEXT,
    COLOR_SLOT_FOUND, COLOR_SLOT_EMPTY, ITEM_COLORS
)
from utils.constants import CELL_SIZE, PANEL_H, ITEM_KINDS, PATH
from utils.helpers import format_score
from utils.text import get_text


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 30, bold=True)

    def draw(self, screen, game):
        """Draw whatever the current state needs"""
        screen.fill(COLOR_BG)
        state = game.state
        text = get_text(game.language)

        if state == GameState.LANGUAGE_SELECT:
            self._draw_center_lines(screen, [
                (text['title'], self.font_large, COLOR_TEXT_HIGHLIGHT),
                (text['select_lang'], self.font_medium, COLOR_TEXT),
                (text['lang_keys'], self.font_medium, COLOR_TEXT_DIM),
            ])
        elif state == GameState.LOADING:
            self._draw_center_lines(screen, [(text['loading'], self.font_large, COLOR_TEXT)])
        elif state == GameState.ERROR:
            self._draw_center_lines(screen, [
                (text['error'], self.font_large, COLOR_TEXT_ERROR),
                (game.last_error or '', self.font_small, COLOR_TEXT_DIM),
                (text['restart'], self.font_medium, COLOR_TEXT),
            ])
        elif state == GameState.PLAYING:
            self.draw_maze(screen, game)
            self.draw_hud(screen, game, text)
        elif state == GameState.LEVEL_COMPLETE:
            self.draw_shop(screen, game, text)

    def draw_maze(self, screen, game):
        """Maze cells, letters, enemy and player"""
        maze = game.maze

        # One pixel per cell, scaled up
        rgb = np.where((maze.grid == PATH)[..., None], COLOR_PATH, COLOR_WALL).astype(np.uint8)
        surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
        screen.blit(pygame.transform.scale(surface, (maze.cols * CELL_SIZE, maze.rows * CELL_SIZE)), (0, 0))

        for letter in game.letters:
            if letter.collected:
                continue
            self._draw_cell(screen, letter.x, letter.y, COLOR_LETTER, pad=3)
            glyph = self.font_small.render(letter.char, True, COLOR_LETTER_TEXT)
            screen.blit(glyph, (letter.x * CELL_SIZE + (CELL_SIZE - glyph.get_width()) // 2,
                                letter.y * CELL_SIZE + (CELL_SIZE - glyph.get_height()) // 2))

        if game.enemy.active:
            self._draw_cell(screen, game.enemy.x, game.enemy.y, COLOR_ENEMY, pad=4)

        self._draw_cell(screen, game.player.x, game.player.y, COLOR_PLAYER, pad=3)

    def draw_hud(self, screen, game, text):
        """Panel under the maze: level, score, word slots, hint, inventory"""
        screen_w = screen.get_width()
        panel_y = game.maze.rows * CELL_SIZE
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, PANEL_H))

        header = f"{text['level']} {game.level_number}   {text['score']} {format_score(game.score)}"
        if game.enemy.active:
            header += f"   {text['hunter']} x{game.enemy.speed_multiplier:.1f}"
        screen.blit(self.font_medium.render(header, True, COLOR_TEXT), (10, panel_y + 8))

        self._draw_word_slots(screen, game.word_progress(), 10, panel_y + 32)

        hint = self.font_small.render(f"{text['hint']}: {game.hint}", True, COLOR_TEXT_DIM)
        screen.blit(hint, (10, panel_y + 68))

        inv = game.inventory
        x = 10
        for kind in ITEM_KINDS:
            label = self.font_small.render(f"{text['items'][kind]}: {inv.counts[kind]}", True, ITEM_COLORS[kind])
            screen.blit(label, (x, panel_y + 88))
            x += label.get_width() + 16

        controls = self.font_small.render(text['controls'], True, COLOR_TEXT_DIM)
        screen.blit(controls, (screen_w - controls.get_width() - 10, panel_y + 88))

    def draw_shop(self, screen, game, text):
        """Level complete screen with the merchant"""
        lines = [
            (text['complete'], self.font_large, COLOR_TEXT_HIGHLIGHT),
            (f"{text['found']} {game.target_word}", self.font_medium, COLOR_TEXT),
            (f"{text['score']}: {format_score(game.score)}", self.font_medium, COLOR_TEXT),
            (text['shop'], self.font_large, COLOR_TEXT_HIGHLIGHT),
        ]
        for i, kind in enumerate(ITEM_KINDS, start=1):
            color = ITEM_COLORS[kind] if can_afford(game.score, kind) else COLOR_TEXT_DIM
            owned = game.inventory.counts[kind]
            lines.append((
                f"{i}. {text['items'][kind]} ({text['desc'][kind]}) - {get_price(kind)}  [{owned}]",
                self.font_medium, color,
            ))
        lines.append((text['next'], self.font_medium, COLOR_TEXT))
        lines.append((text['restart'], self.font_small, COLOR_TEXT_DIM))
        self._draw_center_lines(screen, lines)

    def _draw_word_slots(self, screen, progress, x, y, size=28):
        for i, char in enumerate(progress):
            rect = (x + i * (size + 6), y, size, size + 4)
            pygame.draw.rect(screen, COLOR_SLOT_FOUND if char else COLOR_SLOT_EMPTY, rect, border_radius=4)
            glyph = self.font_medium.render(char or '?', True, COLOR_TEXT if char else COLOR_TEXT_DIM)
            screen.blit(glyph, (rect[0] + (size - glyph.get_width()) // 2, y + 6))

    def _draw_cell(self, screen, x, y, color, pad=4):
        """Draw filled cell"""
        rx = x * CELL_SIZE + pad
        ry = y * CELL_SIZE + pad
        rw = CELL_SIZE - pad * 2
        pygame.draw.rect(screen, color, (rx, ry, rw, rw), border_radius=4)

    def _draw_center_lines(self, screen, lines):
        screen_w, screen_h = screen.get_size()
        total = sum(font.get_linesize() + 8 for _, font, _ in lines)
        y = (screen_h - total) // 2
        for content, font, color in lines:
            surf = font.render(content, True, color)
            screen.blit(surf, (screen_w // 2 - surf.get_width() // 2, y))
            y += font.get_linesize() + 8
