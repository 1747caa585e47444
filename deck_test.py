"""
Deck generation tests
"""
import random
from collections import Counter

import pytest

from config.base import ConfigurationError, DEFAULT_IDENTITIES
from core.deck import DeckGenerator, generate


@pytest.mark.parametrize("pair_count", [1, 2, 5, 10, 18])
def test_every_identity_appears_twice(pair_count):
    identities = [f"card{i}" for i in range(pair_count)]

    deck = generate(identities, pair_count * 2, rng=7)

    assert len(deck) == pair_count * 2
    assert Counter(deck) == {identity: 2 for identity in identities}


@pytest.mark.parametrize("seed", [0, 1, 2, 42, 1234])
def test_shuffle_is_a_permutation(seed):
    deck = generate(DEFAULT_IDENTITIES, 20, rng=seed)
    doubled = [identity for identity in DEFAULT_IDENTITIES for _ in range(2)]

    assert sorted(deck) == sorted(doubled)


def test_same_seed_deals_same_deck():
    first = DeckGenerator(99).generate(DEFAULT_IDENTITIES, 20)
    second = DeckGenerator(random.Random(99)).generate(DEFAULT_IDENTITIES, 20)
    assert first == second


def test_set_input_is_reproducible_with_seed():
    identities = {"shark", "crab", "turtle"}
    assert generate(identities, 6, rng=3) == generate(set(identities), 6, rng=3)


def test_generator_without_seed_still_deals_valid_deck():
    deck = DeckGenerator().generate(["A", "B"], 4)
    assert Counter(deck) == {"A": 2, "B": 2}


def test_deck_is_immutable():
    deck = generate(["A", "B"], 4, rng=1)
    assert isinstance(deck, tuple)


def test_shuffle_reaches_different_arrangements():
    decks = {generate(["A", "B", "C"], 6, rng=seed) for seed in range(50)}
    # 6! / 2^3 = 90 arrangements; 50 seeds should land on many of them
    assert len(decks) > 10


def test_odd_board_size_is_rejected():
    with pytest.raises(ConfigurationError):
        generate(["A", "B"], 5)


def test_identity_count_must_match_board():
    with pytest.raises(ConfigurationError):
        generate(["A", "B", "C"], 4)
    with pytest.raises(ConfigurationError):
        generate(DEFAULT_IDENTITIES, 18)


def test_duplicate_identities_are_rejected():
    with pytest.raises(ConfigurationError):
        generate(["A", "A"], 4)


def test_empty_board_is_rejected():
    with pytest.raises(ConfigurationError):
        generate([], 0)
