import random

import pytest

from game.game_flow import GameFlow
from game.game_state import GameState
from game.input_sampler import Intent
from game.level_manager import LevelManager
from game.word_source import WordProvider
from utils.constants import ITEM_DRILL, ITEM_SWORD, START_POS, UP, DOWN, LEFT, RIGHT

# ======================================================================
# LIFECYCLE
# ======================================================================

def test_select_language_starts_level_one(make_game):
    game = make_game(start=False)
    assert game.state == GameState.LANGUAGE_SELECT

    assert game.select_language('pt') is True
    assert game.state == GameState.PLAYING
    assert game.language == 'pt'
    assert game.level_number == 1
    assert game.player.position == START_POS
    assert game.level_manager.created == [(1, 'pt')]


def test_select_language_resets_everything(make_game):
    game = make_game(word="A", letters=[(2, 1)], drills=2)
    game.move(*RIGHT)
    game.advance_level()
    game.score = 10

    game.select_language('en')

    assert game.level_number == 1
    assert game.score == 0
    assert game.inventory.as_dict() == {'shields': 0, 'swords': 0, 'pistols': 0, 'drills': 0}
    assert game.state == GameState.PLAYING


def test_unsupported_language(make_game):
    game = make_game(start=False)
    with pytest.raises(ValueError):
        game.select_language('fr')


def test_setup_failure_goes_to_error(make_game):
    game = make_game(fail=True)

    assert game.state == GameState.ERROR
    assert "no word" in game.last_error

    game.restart_game()
    assert game.state == GameState.LANGUAGE_SELECT


def test_restart_game_cancels_timers(make_game):
    game = make_game(enemy=(7, 3))
    game.restart_game()

    assert game.state == GameState.LANGUAGE_SELECT
    assert game.scheduler.pending() == []

# ======================================================================
# MOVEMENT
# ======================================================================

def test_wall_and_bounds_block(make_game):
    game = make_game()

    assert game.move(*UP) is False
    assert game.move(*LEFT) is False
    assert game.player.position == START_POS


def test_move_ignored_outside_playing(make_game):
    game = make_game(start=False)
    assert game.move(*RIGHT) is False


def test_collecting_letters_scores(make_game):
    game = make_game(word="AB", letters=[(2, 1), (5, 1)])

    assert game.move(*RIGHT)
    assert game.score == 1
    assert game.collected_word == "A"
    assert game.word_progress() == ["A", None]
    assert game.state == GameState.PLAYING


def test_last_letter_completes_level(make_game):
    game = make_game(word="AB", letters=[(2, 1), (3, 1)])
    game.move(*RIGHT)
    game.move(*RIGHT)

    assert game.state == GameState.LEVEL_COMPLETE
    assert game.score == 2
    assert game.scheduler.pending() == []


def test_level_complete_waits_for_delay(make_game):
    game = make_game(word="A", letters=[(2, 1)], level_complete_delay=300)
    game.move(*RIGHT)
    assert game.state == GameState.PLAYING

    game.update(299)
    assert game.state == GameState.PLAYING
    game.update(1)
    assert game.state == GameState.LEVEL_COMPLETE


def test_drill_through_wall(make_game):
    game = make_game(drills=1)
    game.move(*RIGHT)

    assert game.maze.is_wall(2, 2)
    assert game.move(*DOWN) is True
    assert game.player.position == (2, 2)
    assert game.maze.is_path(2, 2)
    assert game.inventory.drills == 0

    # Dug out for good
    game.move(*UP)
    assert game.move(*DOWN) is True


def test_wall_without_drill(make_game):
    game = make_game()
    game.move(*RIGHT)

    assert game.move(*DOWN) is False
    assert game.maze.is_wall(2, 2)


def test_held_direction_moves_on_input_tick(make_game):
    game = make_game()
    game.press(Intent.MOVE_RIGHT)

    game.update(110)
    assert game.player.position == (2, 1)
    game.update(110)
    assert game.player.position == (3, 1)

    game.release(Intent.MOVE_RIGHT)
    game.update(500)
    assert game.player.position == (3, 1)


def test_handle_intent_dispatch(make_game):
    game = make_game()
    assert game.handle_intent(Intent.MOVE_DOWN) is True
    assert game.player.position == (1, 2)
    assert game.handle_intent(Intent.FIRE) is False

# ======================================================================
# ENEMY / COMBAT
# ======================================================================

def test_enemy_steps_on_its_timer_around_letters(make_game):
    """Row 1 holds a letter at (7,1), so the hunter goes along row 3"""
    game = make_game(enemy=(7, 3), letters=[(2, 3), (4, 3), (7, 1)])
    game.level.letter_manager.collect_letter(2, 3)
    game.level.letter_manager.collect_letter(4, 3)

    game.update(599)
    assert game.enemy.position == (7, 3)
    game.update(1)
    assert game.enemy.position == (6, 3)


def test_enemy_catch_with_shield(make_game):
    game = make_game(shields=1)
    game.enemy.spawn(2, 1)
    level = game.level

    game.enemy_step()

    assert game.inventory.shields == 0
    assert game.player.position == START_POS
    assert game.enemy.position == START_POS
    assert game.level is level
    assert game.score == 0


def test_enemy_on_player_without_shield_restarts(make_game):
    game = make_game(shields=1)
    game.enemy.spawn(2, 1)
    game.enemy_step()  # shield absorbs
    generation = game.generation

    game.enemy_step()  # already on the player

    assert game.generation == generation + 1
    assert game.state == GameState.PLAYING


def test_death_deducts_letters_of_this_attempt(make_game):
    game = make_game(word="CATS", letters=[(2, 1), (3, 1), (4, 1), (1, 3)], drills=1)
    game.score = 10
    for _ in range(3):
        game.move(*RIGHT)
    assert game.score == 13

    game.enemy.spawn(5, 1)
    game.enemy_step()

    assert game.score == 10
    assert game.player.position == START_POS
    assert game.level_number == 1
    assert game.level.letter_manager.collected_count() == 0
    assert game.inventory.drills == 1
    assert len(game.level_manager.created) == 2


def test_death_score_never_negative(make_game):
    game = make_game(word="CATS", letters=[(2, 1), (3, 1), (4, 1), (1, 3)])
    for _ in range(3):
        game.move(*RIGHT)
    game.score = 1  # spent elsewhere

    game.enemy.spawn(5, 1)
    game.enemy_step()
    assert game.score == 0


def test_walking_into_enemy_without_sword(make_game):
    game = make_game(shields=1)
    game.enemy.spawn(2, 1)

    assert game.move(*RIGHT) is False
    assert game.player.position == START_POS
    assert game.inventory.shields == 0
    assert game.enemy.position == (2, 1)


def test_death_is_not_reentrant(make_game):
    game = make_game()
    game._restarting = True
    assert game._trigger_death() is False
    assert len(game.level_manager.created) == 1


def test_sword_kill_and_respawn(make_game):
    game = make_game(swords=1)
    game.enemy.spawn(2, 1)

    assert game.move(*RIGHT) is True
    assert game.player.position == (2, 1)
    assert not game.enemy.active
    assert game.inventory.swords == 0
    assert game.enemy.speed_multiplier == pytest.approx(1.1)

    game.update(1999)
    assert not game.enemy.active
    game.update(1)

    # Every free cell is a candidate here; (7,3) is farthest from (2,1)
    assert game.enemy.active
    assert game.enemy.position == (7, 3)
    assert game.enemy_interval() == pytest.approx(600 / 1.1)


def test_sword_kill_does_not_collect_letter(make_game):
    game = make_game(word="AB", letters=[(2, 1), (5, 1)], swords=1)
    game.enemy.spawn(2, 1)

    game.move(*RIGHT)
    assert game.score == 0
    assert game.level.letter_manager.get_letter_at(2, 1) is not None


def test_pistol_clear_shot(make_game):
    game = make_game(pistols=1)
    game.enemy.spawn(1, 3)

    assert game.fire() is True
    assert not game.enemy.active
    assert game.inventory.pistols == 0


def test_pistol_blocked_by_wall(make_game):
    game = make_game(pistols=1)
    game.move(*RIGHT)
    game.enemy.spawn(2, 3)

    assert game.fire() is False
    assert game.enemy.active
    assert game.inventory.pistols == 1


def test_pistol_needs_alignment(make_game):
    game = make_game(pistols=1)
    game.enemy.spawn(3, 3)
    assert game.fire() is False

    game.enemy.move_to(*START_POS)
    assert game.fire() is False
    assert game.inventory.pistols == 1


def test_fire_without_pistol(make_game):
    game = make_game()
    game.enemy.spawn(1, 3)
    assert game.fire() is False
    assert game.enemy.active


def test_stale_respawn_is_dropped(make_game):
    game = make_game(swords=1)
    game.enemy.spawn(2, 1)
    game.move(*RIGHT)
    old_generation = game.generation

    game.select_language('en')
    assert 'respawn' not in [t.name for t in game.scheduler.pending()]
    assert game.enemy.speed_multiplier == 1.0

    game._respawn_enemy(old_generation)
    assert not game.enemy.active

# ======================================================================
# SHOP
# ======================================================================

def test_shop_only_after_level(make_game):
    game = make_game(word="A", letters=[(2, 1)])
    game.score = 20
    assert game.buy(ITEM_DRILL) is False

    game.move(*RIGHT)
    assert game.state == GameState.LEVEL_COMPLETE
    game.score = 12

    assert game.buy(ITEM_DRILL) is True
    assert game.score == 0
    assert game.inventory.drills == 1
    assert game.buy(ITEM_DRILL) is False
    assert game.inventory.drills == 1


def test_advance_level_keeps_inventory_and_score(make_game):
    game = make_game(word="A", letters=[(2, 1)])
    game.move(*RIGHT)
    game.score = 9
    game.handle_intent(Intent.BUY_ITEM, ITEM_SWORD)

    assert game.skip_shop() is True
    assert game.level_number == 2
    assert game.state == GameState.PLAYING
    assert game.score == 5
    assert game.inventory.swords == 1
    assert game.level_manager.created[-1] == (2, 'en')
    assert game.player.position == START_POS


def test_advance_level_only_from_shop(make_game):
    game = make_game()
    assert game.advance_level() is False
    assert game.level_number == 1

# ======================================================================
# FULL STACK
# ======================================================================

def test_generated_level_plays(stub_source):
    """Real generator, sampler and pursuit behind the flow"""
    rng = random.Random(2024)
    game = GameFlow(LevelManager(WordProvider(stub_source), rng), rng=rng)
    game.select_language('en')

    assert game.state == GameState.PLAYING
    assert (game.maze.cols, game.maze.rows) == (21, 21)
    assert len(game.letters) == 3
    assert game.enemy.active

    start = game.enemy.position
    game.update(600)
    assert game.enemy.position != start
    assert game.maze.is_path(*game.enemy.position)

    snapshot = game.snapshot()
    assert snapshot['state'] == GameState.PLAYING
    assert snapshot['word_progress'] == [None, None, None]
    assert snapshot['enemy_active'] is True
