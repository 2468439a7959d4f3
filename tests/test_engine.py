# tests/test_engine.py
import random
import numpy as np
import pytest
from core.engine import new_game, step
from core.interfaces import Cell, Outcome, UP, DOWN, LEFT, RIGHT
from core.input_mapper import InputMapper

def _move_food(state, coord):
    state.grid.set(state.food, Cell.EMPTY)
    state.grid.set(coord, Cell.FOOD)

def test_new_game_places_food_and_one_segment(assert_consistent):
    st = new_game(10, 5, DOWN, random.Random(0))
    assert len(st.snake) == 1
    assert st.heading == DOWN
    assert st.food is not None and st.food != st.snake.head
    assert st.outcome is Outcome.IN_PROGRESS
    assert_consistent(st)

def test_new_game_rejects_bad_heading():
    with pytest.raises(ValueError):
        new_game(10, 5, (1, 1))

def test_plain_move_keeps_length(state_factory, assert_consistent):
    st = state_factory([(4, 4), (4, 3), (4, 2)], food=(0, 0), heading=RIGHT)
    res = step(st)
    assert res.outcome is Outcome.IN_PROGRESS
    assert not res.ate
    assert st.snake.segments() == ((4, 5), (4, 4), (4, 3))
    assert st.grid.count(Cell.SNAKE) == 3
    assert st.food == (0, 0)
    assert res.changes == (((4, 5), Cell.SNAKE), ((4, 2), Cell.EMPTY))
    assert st.step_count == 1
    assert_consistent(st)

def test_eating_grows_by_one_and_moves_food(state_factory, assert_consistent):
    st = state_factory([(5, 5)], food=(5, 6), heading=RIGHT)
    res = step(st)
    assert res.ate
    assert res.apples_eaten == 1
    assert st.snake.segments() == ((5, 6), (5, 5))
    new_food = st.food
    assert new_food not in ((5, 6), (5, 5))
    assert st.grid.get(new_food) == Cell.FOOD
    assert res.changes[0] == ((5, 6), Cell.SNAKE)
    assert res.changes[1] == (new_food, Cell.FOOD)
    assert_consistent(st)

def test_feeding_to_target_then_win_without_moving(state_factory, assert_consistent):
    st = state_factory([(5, 5)], food=(5, 6), heading=RIGHT, size=10, win=5)
    mapper = InputMapper(st)
    path = [RIGHT, RIGHT, RIGHT, DOWN, DOWN]
    for i, h in enumerate(path):
        mapper.on_direction(h)
        hr, hc = st.snake.head
        target = (hr + h[0], hc + h[1])
        if i > 0:
            _move_food(st, target)
        res = step(st)
        assert res.outcome is Outcome.IN_PROGRESS
        assert res.apples_eaten == i + 1
        assert_consistent(st)

    assert st.snake.head == (7, 8)
    before = st.snake.segments()
    cells_before = st.grid.snapshot()
    res = step(st)
    assert res.outcome is Outcome.WON
    assert res.reason == "win"
    assert res.changes == ()
    assert st.snake.segments() == before
    assert np.array_equal(st.grid.cells, cells_before)

def test_win_not_reported_on_consuming_tick(state_factory):
    st = state_factory([(0, 2), (0, 1), (0, 0)], food=(0, 3), heading=RIGHT, win=3)
    res = step(st)
    assert res.apples_eaten == 3
    assert res.outcome is Outcome.IN_PROGRESS
    assert step(st).outcome is Outcome.WON

def test_wall_collision_leaves_state_unchanged(state_factory):
    st = state_factory([(3, 9)], food=(0, 0), heading=RIGHT)
    cells_before = st.grid.snapshot()
    res = step(st)
    assert res.outcome is Outcome.LOST
    assert res.reason == "wall"
    assert st.snake.segments() == ((3, 9),)
    assert np.array_equal(st.grid.cells, cells_before)
    assert st.step_count == 0

@pytest.mark.parametrize("head,heading", [((0, 4), UP), ((9, 4), DOWN), ((4, 0), LEFT)])
def test_every_wall_is_lethal(state_factory, head, heading):
    st = state_factory([head], food=(5, 5), heading=heading)
    assert step(st).reason == "wall"

def test_self_collision_with_body(state_factory):
    st = state_factory([(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)], food=(9, 9), heading=DOWN)
    res = step(st)
    assert res.outcome is Outcome.LOST
    assert res.reason == "self"
    assert st.snake.head == (2, 2)

def test_moving_into_vacating_tail_is_a_collision(state_factory):
    st = state_factory([(2, 2), (2, 3), (3, 3), (3, 2)], food=(9, 9), heading=DOWN)
    res = step(st)
    assert res.outcome is Outcome.LOST
    assert res.reason == "self"

def test_win_takes_precedence_over_collision(state_factory):
    segs = [(0, 9), (0, 8), (0, 7), (0, 6), (0, 5), (0, 4)]
    st = state_factory(segs, food=(5, 5), heading=RIGHT, win=5)
    res = step(st)
    assert res.outcome is Outcome.WON

def test_step_after_end_raises(state_factory):
    st = state_factory([(3, 9)], food=(0, 0), heading=RIGHT)
    step(st)
    with pytest.raises(RuntimeError):
        step(st)

def test_random_walk_keeps_invariants(assert_consistent):
    rng = random.Random(11)
    for seed in range(20):
        st = new_game(6, 8, RIGHT, random.Random(seed))
        mapper = InputMapper(st)
        for _ in range(5000):
            if st.outcome is not Outcome.IN_PROGRESS:
                break
            mapper.on_direction(rng.choice([UP, DOWN, LEFT, RIGHT]))
            step(st)
            assert_consistent(st)
