"""
Game Flow - the word maze state machine

Owns all mutable game state (maze, player, enemy, letters, inventory, score)
and resolves player intents and enemy steps against it. Everything runs on
one thread: input and timers are processed one at a time through the
scheduler, so no locking is involved.
"""

import logging
import random

from entities.enemy import Enemy
from entities.player import Inventory, Player
from game.game_state import GameState, GameStateManager
from game.input_sampler import DIRECTION_INTENTS, Intent, InputSampler
from game.level_manager import LevelManager
from game.scheduler import Scheduler
from game.exceptions import LevelSetupError
from game.shop import buy_item
from maze.maze_core import clear_line
from maze.pursuit import next_step_towards
from maze.sampler import free_positions, furthest
from utils.constants import (
    DIRS, LANGUAGES, DEFAULT_LANGUAGE,
    ITEM_SHIELD, ITEM_SWORD, ITEM_PISTOL, ITEM_DRILL,
    ENEMY_RESPAWN_DELAY_MS, ENEMY_RESPAWN_CANDIDATES,
    INPUT_TICK_MS, LEVEL_COMPLETE_DELAY_MS
)

logger = logging.getLogger(__name__)


class GameFlow:
    """
    High-level game controller

    States: LANGUAGE_SELECT -> LOADING -> PLAYING <-> LEVEL_COMPLETE ->
    LOADING (next level). Death without a shield goes PLAYING -> LOADING
    for the same level; a failed setup ends in ERROR.
    """
    def __init__(self, level_manager=None, state_manager=None, scheduler=None,
                 rng=None, level_complete_delay=LEVEL_COMPLETE_DELAY_MS):
        """
        Args:
            level_manager: LevelManager (word source + generation)
            state_manager: GameStateManager
            scheduler: Scheduler driving input and enemy timers
            rng: random.Random used for respawn sampling
            level_complete_delay: ms between the last letter and the shop,
                0 for an immediate transition
        """
        self.rng = rng or random.Random()
        self.level_manager = level_manager or LevelManager(rng=self.rng)
        self.state_manager = state_manager or GameStateManager()
        self.scheduler = scheduler or Scheduler()
        self.input_sampler = InputSampler()
        self.level_complete_delay = level_complete_delay

        # Playthrough state
        self.language = DEFAULT_LANGUAGE
        self.level_number = 1
        self.score = 0
        self.inventory = Inventory()

        # Level attempt state
        self.level = None
        self.player = Player()
        self.enemy = Enemy()
        self.generation = 0  # Bumped on every level (re)build
        self.last_error = None

        # Timers
        self._input_timer = None
        self._enemy_timer = None
        self._restarting = False

    # ---------- Accessors ----------

    @property
    def state(self):
        return self.state_manager.current_state

    @property
    def maze(self):
        return self.level.maze if self.level else None

    @property
    def letters(self):
        return self.level.letter_manager.letters if self.level else []

    @property
    def target_word(self):
        return self.level.word if self.level else ''

    @property
    def hint(self):
        return self.level.hint if self.level else ''

    @property
    def collected_word(self):
        if not self.level:
            return ''
        return ''.join(self.level.letter_manager.collected_chars)

    def word_progress(self):
        if not self.level:
            return []
        return self.level.letter_manager.word_progress(self.level.word)

    def enemy_interval(self):
        return self.enemy.move_interval()

    def snapshot(self):
        """Read-only view for the presentation layer"""
        return {
            'state': self.state,
            'language': self.language,
            'level': self.level_number,
            'score': self.score,
            'inventory': self.inventory.as_dict(),
            'maze': self.maze,
            'player': self.player.position,
            'enemy': self.enemy.position,
            'enemy_active': self.enemy.active,
            'enemy_speed': self.enemy.speed_multiplier,
            'enemy_kills': self.enemy.kills,
            'letters': [(l.char, l.position, l.collected) for l in self.letters],
            'word_progress': self.word_progress(),
            'hint': self.hint,
            'error': self.last_error,
        }

    # ---------- Game lifecycle ----------

    def select_language(self, language):
        """
        Start a brand new game in the given language

        Level, score and inventory are all reset.

        Raises:
            ValueError: for an unsupported language
        """
        if language not in LANGUAGES:
            raise ValueError(f"unsupported language: {language}")

        if not self.state_manager.is_state(GameState.LANGUAGE_SELECT):
            self.restart_game()

        self.language = language
        self.level_number = 1
        self.score = 0
        self.inventory.clear()
        self.enemy.kills = 0
        logger.info("New game (language=%s)", language)
        return self._initialize_level(1)

    def restart_game(self):
        """Drop the current run and go back to language selection"""
        self._stop_timers()
        self.input_sampler.clear()
        if not self.state_manager.is_state(GameState.LANGUAGE_SELECT):
            self.state_manager.transition_to(GameState.LANGUAGE_SELECT)

    def advance_level(self):
        """Leave the shop for the next level"""
        if not self.state_manager.is_state(GameState.LEVEL_COMPLETE):
            return False
        self.level_number += 1
        return self._initialize_level(self.level_number)

    skip_shop = advance_level

    def update(self, dt):
        """
        Advance game time

        Args:
            dt: Elapsed milliseconds
        """
        return self.scheduler.advance(dt)

    def _initialize_level(self, number):
        """
        (Re)build a level and start playing it

        Returns:
            True when the level is playable, False when setup failed
        """
        self._stop_timers()
        self.generation += 1
        self.state_manager.transition_to(GameState.LOADING, level=number)

        self.player.reset_position()
        self.enemy.reset()
        self.level = None

        try:
            level = self.level_manager.create_level(number, self.language)
        except LevelSetupError as e:
            logger.exception("Level %d setup failed", number)
            self.last_error = str(e)
            self._restarting = False
            self.state_manager.transition_to(GameState.ERROR, error=str(e))
            return False

        self.level = level
        self.last_error = None
        self._restarting = False

        if level.enemy_spawn is not None:
            self.enemy.spawn(*level.enemy_spawn)

        self.state_manager.transition_to(GameState.PLAYING, level=number)
        self._input_timer = self.scheduler.call_every(INPUT_TICK_MS, self._input_tick, name='input')
        self._arm_enemy_timer()
        return True

    def _stop_timers(self):
        self.scheduler.cancel_all()
        self._input_timer = None
        self._enemy_timer = None

    # ---------- Input ----------

    def handle_intent(self, intent, value=None):
        """
        Dispatch a discrete intent from the presenter

        Args:
            intent: Intent
            value: Item kind for BUY_ITEM, language for SELECT_LANGUAGE

        Returns:
            True if the intent changed something
        """
        if intent in DIRECTION_INTENTS:
            return self.move(*DIRECTION_INTENTS[intent])
        if intent == Intent.FIRE:
            return self.fire()
        if intent == Intent.BUY_ITEM:
            return self.buy(value)
        if intent == Intent.ADVANCE_LEVEL:
            return self.advance_level()
        if intent == Intent.RESTART_GAME:
            self.restart_game()
            return True
        if intent == Intent.SELECT_LANGUAGE:
            return self.select_language(value)
        return False

    def press(self, intent):
        """Direction held down (sampled by the input tick)"""
        self.input_sampler.press(intent)

    def release(self, intent):
        self.input_sampler.release(intent)

    def _input_tick(self):
        direction = self.input_sampler.sample()
        if direction is not None:
            self.move(*direction)

    # ---------- Player actions ----------

    def move(self, dx, dy):
        """
        Move the player one cell

        Walls need a drill (the wall is dug out for good). Walking into the
        enemy kills it with a sword or triggers death otherwise.

        Returns:
            True if the player moved
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            return False
        if (dx, dy) not in DIRS:
            return False

        maze = self.level.maze
        nx, ny = self.player.x + dx, self.player.y + dy

        if not maze.in_bounds(nx, ny):
            return False

        if maze.is_wall(nx, ny):
            if not self.inventory.use(ITEM_DRILL):
                logger.debug("Move to (%d,%d) blocked by wall", nx, ny)
                return False
            maze.carve(nx, ny)
            logger.info("Drilled through (%d,%d), %d drills left", nx, ny, self.inventory.drills)

        if self.enemy.is_at(nx, ny):
            if self.inventory.use(ITEM_SWORD):
                self._kill_enemy('sword')
                self.player.move_to(nx, ny)
                return True
            self._trigger_death()
            return False

        self.player.move_to(nx, ny)

        letters = self.level.letter_manager
        letter = letters.collect_letter(nx, ny)
        if letter:
            self.score += 1
            logger.info("Collected %r (%s), score %d", letter.char, self.collected_word, self.score)
            if letters.all_collected():
                self._schedule_level_complete()

        return True

    def fire(self):
        """
        Shoot along a row or column

        Needs a pistol, a live enemy sharing exactly one axis with the
        player and no wall in between.

        Returns:
            True if the enemy was shot
        """
        if not self.state_manager.is_state(GameState.PLAYING):
            return False
        if not self.inventory.has(ITEM_PISTOL) or not self.enemy.active:
            return False

        px, py = self.player.position
        ex, ey = self.enemy.position

        if (px == ex) == (py == ey):
            return False  # not aligned, or same cell

        if not clear_line(self.level.maze, (px, py), (ex, ey)):
            logger.debug("Shot blocked between (%d,%d) and (%d,%d)", px, py, ex, ey)
            return False

        self.inventory.use(ITEM_PISTOL)
        self._kill_enemy('pistol')
        return True

    def buy(self, kind):
        """Buy one item in the shop; no-op outside the shop or when too poor"""
        if not self.state_manager.is_state(GameState.LEVEL_COMPLETE):
            return False
        bought, self.score = buy_item(kind, self.score, self.inventory)
        return bought

    # ---------- Enemy ----------

    def _arm_enemy_timer(self):
        """(Re)start the enemy cadence for the current speed multiplier"""
        self.scheduler.cancel(self._enemy_timer)
        self._enemy_timer = None

        if self.enemy.active and self.state_manager.is_state(GameState.PLAYING):
            self._enemy_timer = self.scheduler.call_every(
                self.enemy.move_interval(), self.enemy_step, name='enemy'
            )

    def enemy_step(self):
        """
        One enemy move toward the player

        Uncollected letters are penalized so the hunter walks around them.
        The enemy keeps its new cell even when the step catches the player.
        """
        if not self.state_manager.is_state(GameState.PLAYING) or not self.enemy.active:
            return

        player_pos = self.player.position

        # Already on the player (e.g. a shield absorbed the last hit)
        if self.enemy.position == player_pos:
            self._trigger_death()
            return

        next_pos = next_step_towards(
            self.level.maze,
            self.enemy.position,
            player_pos,
            self.level.letter_manager.uncollected_positions(),
        )
        self.enemy.move_to(*next_pos)
        logger.debug("Enemy -> (%d,%d)", next_pos.x, next_pos.y)

        if next_pos == player_pos:
            self._trigger_death()

    def _kill_enemy(self, weapon):
        self.enemy.kill()
        self._arm_enemy_timer()
        logger.info("Enemy killed with %s, next speed x%.1f", weapon, self.enemy.speed_multiplier)

        generation = self.generation
        self.scheduler.call_later(
            ENEMY_RESPAWN_DELAY_MS, lambda: self._respawn_enemy(generation), name='respawn'
        )

    def _respawn_enemy(self, generation):
        """Bring the enemy back as far from the player as possible"""
        if generation != self.generation or not self.state_manager.is_state(GameState.PLAYING):
            logger.debug("Dropped stale respawn (generation %d)", generation)
            return

        maze = self.level.maze
        candidates = free_positions(maze, ENEMY_RESPAWN_CANDIDATES, self.rng)
        spawn = furthest(candidates, self.player.position)
        if spawn is None:
            spawn = (maze.cols - 2, maze.rows - 2)

        self.enemy.spawn(*spawn)
        self._arm_enemy_timer()
        logger.info("Enemy respawned at (%d,%d)", spawn[0], spawn[1])

    # ---------- Death / completion ----------

    def _trigger_death(self):
        """
        Resolve a hit on the player

        A shield absorbs it with no other effect. Otherwise the letters
        collected in this attempt are taken off the score and the level is
        rebuilt (inventory and level number are kept).

        Returns:
            True if the level was restarted
        """
        if self._restarting:
            return False

        if self.inventory.use(ITEM_SHIELD):
            logger.info("Shield absorbed the hit, %d left", self.inventory.shields)
            return False

        self._restarting = True
        penalty = self.level.letter_manager.collected_count()
        self.score = max(0, self.score - penalty)
        logger.info("Caught by the enemy on level %d, -%d points", self.level_number, penalty)

        self._initialize_level(self.level_number)
        return True

    def _schedule_level_complete(self):
        generation = self.generation
        if self.level_complete_delay <= 0:
            self._complete_level(generation)
        else:
            self.scheduler.call_later(
                self.level_complete_delay, lambda: self._complete_level(generation), name='complete'
            )

    def _complete_level(self, generation):
        if generation != self.generation or not self.state_manager.is_state(GameState.PLAYING):
            return

        self._stop_timers()
        self.input_sampler.clear()
        self.state_manager.transition_to(
            GameState.LEVEL_COMPLETE,
            level=self.level_number,
            word=self.level.word,
        )
        logger.info("Level %d complete (%s), score %d", self.level_number, self.level.word, self.score)

    def __repr__(self):
        return (f"GameFlow(state={self.state_manager.get_state_name()}, level={self.level_number}, "
                f"score={self.score})")
