import random

import pytest

from puyo.ai import AI, Move, RandomAI, create_random_ai
from puyo.field import Field


def test_move_fields():
    move = Move(target_x=3, rotation=1)
    assert (move.target_x, move.rotation) == (3, 1)


def test_move_is_immutable():
    move = Move(1, 2)
    with pytest.raises(AttributeError):
        move.target_x = 4
    assert (move.target_x, move.rotation) == (1, 2)


def test_ai_is_abstract():
    with pytest.raises(TypeError):
        AI()


@pytest.mark.parametrize("width", [1, 3, 6, 10])
def test_random_ai_moves_within_bounds(width):
    ai = RandomAI(random.Random(42))
    field = Field(height=14, width=width)
    for _ in range(200):
        move = ai.decide(field)
        assert 0 <= move.target_x < width
        assert 0 <= move.rotation < 4


def test_random_ai_covers_all_choices():
    ai = RandomAI(random.Random(7))
    field = Field()
    moves = [ai.decide(field) for _ in range(1000)]
    assert {m.target_x for m in moves} == set(range(field.width))
    assert {m.rotation for m in moves} == {0, 1, 2, 3}


def test_random_ai_is_deterministic_with_seed():
    field = Field()
    first = [RandomAI(random.Random(5)).decide(field) for _ in range(1)]
    a = RandomAI(random.Random(5))
    b = RandomAI(random.Random(5))
    seq_a = [a.decide(field) for _ in range(20)]
    seq_b = [b.decide(field) for _ in range(20)]
    assert seq_a == seq_b
    assert seq_a[0] == first[0]


def test_create_random_ai_uses_given_rng():
    field = Field()
    ai = create_random_ai(random.Random(11))
    reference = RandomAI(random.Random(11))
    assert [ai.decide(field) for _ in range(10)] == [
        reference.decide(field) for _ in range(10)
    ]


def test_create_random_ai_without_rng_produces_valid_moves():
    ai = create_random_ai()
    field = Field(width=4)
    move = ai.decide(field)
    assert 0 <= move.target_x < 4 and 0 <= move.rotation < 4


def test_random_ai_does_not_modify_field():
    field = Field()
    field.set_cell(0, 13, field.get_cell(0, 13))
    before = [row[:] for row in field.grid]
    RandomAI(random.Random(1)).decide(field)
    assert field.grid == before