"""
Word Maze
Collect the letters of the hidden word before the hunter catches you
"""

import logging
import random
import sys

import pygame

from game.game_flow import GameFlow
from game.game_state import GameState
from game.input_sampler import Intent
from game.level_manager import LevelManager
from game.ui_manager import UIManager
from utils.constants import (
    FPS, PANEL_H, CELL_SIZE, MAZE_BASE_SIZE, ITEM_KINDS, LANG_EN, LANG_PT
)
from config import GAME_TITLE, GAME_VERSION, get_language, get_log_level, get_seed

logger = logging.getLogger(__name__)

# Held keys -> direction intents
MOVE_KEYS = {
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_w: Intent.MOVE_UP,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_s: Intent.MOVE_DOWN,
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_d: Intent.MOVE_RIGHT,
}

SHOP_KEYS = {
    pygame.K_1: ITEM_KINDS[0],
    pygame.K_2: ITEM_KINDS[1],
    pygame.K_3: ITEM_KINDS[2],
    pygame.K_4: ITEM_KINDS[3],
}

LANGUAGE_KEYS = {
    pygame.K_e: LANG_EN,
    pygame.K_p: LANG_PT,
}


class MazeGame:
    """
    Main game class
    """
    def __init__(self, seed=None, language=None):
        pygame.init()

        rng = random.Random(seed)
        self.game_flow = GameFlow(LevelManager(rng=rng), rng=rng)
        self.game_flow.language = language or get_language()
        self.ui_manager = UIManager()

        # Screen (resized when the maze size changes)
        self.screen = None
        self.screen_size = None
        self._resize_for(MAZE_BASE_SIZE, MAZE_BASE_SIZE)

        self.clock = pygame.time.Clock()
        self.running = True

    def _resize_for(self, cols, rows):
        size = (cols * CELL_SIZE, rows * CELL_SIZE + PANEL_H)
        if size == self.screen_size:
            return
        self.screen_size = size
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")
        logger.debug("Window resized to %dx%d", *size)

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                self._handle_keydown(event.key)

            elif event.type == pygame.KEYUP and event.key in MOVE_KEYS:
                self.game_flow.release(MOVE_KEYS[event.key])

    def _handle_keydown(self, key):
        """Handle key press based on current state"""
        flow = self.game_flow
        state = flow.state

        if state == GameState.LANGUAGE_SELECT:
            if key in LANGUAGE_KEYS:
                flow.handle_intent(Intent.SELECT_LANGUAGE, LANGUAGE_KEYS[key])

        elif state == GameState.PLAYING:
            if key in MOVE_KEYS:
                # Step right away, then keep stepping on the input tick while held
                flow.press(MOVE_KEYS[key])
                flow.handle_intent(MOVE_KEYS[key])
            elif key == pygame.K_SPACE:
                flow.handle_intent(Intent.FIRE)
            elif key == pygame.K_r:
                flow.handle_intent(Intent.RESTART_GAME)

        elif state == GameState.LEVEL_COMPLETE:
            if key in SHOP_KEYS:
                flow.handle_intent(Intent.BUY_ITEM, SHOP_KEYS[key])
            elif key == pygame.K_RETURN:
                flow.handle_intent(Intent.ADVANCE_LEVEL)
            elif key == pygame.K_r:
                flow.handle_intent(Intent.RESTART_GAME)

        elif state == GameState.ERROR:
            if key == pygame.K_r:
                flow.handle_intent(Intent.RESTART_GAME)

    def update(self, dt_ms):
        self.game_flow.update(dt_ms)

    def render(self):
        maze = self.game_flow.maze
        if maze is not None:
            self._resize_for(maze.cols, maze.rows)
        self.ui_manager.draw(self.screen, self.game_flow)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)

            self.handle_events()
            self.update(dt_ms)
            self.render()

        pygame.quit()
        sys.exit()


def main():
    """Entry point"""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = MazeGame(seed=get_seed())
    game.run()


if __name__ == "__main__":
    main()
