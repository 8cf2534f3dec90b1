"""Tests for elastic equal-mass collision response and kind conversion."""

import itertools

import numpy as np
import pytest

from rps_sims.core import ConversionEvent, CollisionEvent, ParticleKind, create_particle, resolve_collision
from rps_sims.core.collisions import in_contact, pair_energy


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_pair(kind_a, kind_b, pos_a=(10.0, 50.0), pos_b=(12.0, 50.0), vel_a=(1.0, 0.0), vel_b=(-1.0, 0.0)):
    a = create_particle(kind_a, pos_a, vel_a)
    b = create_particle(kind_b, pos_b, vel_b)
    a.id, b.id = 0, 1
    return a, b


# ===========================================================================
# Velocity response
# ===========================================================================


class TestElasticResponse:

    def test_head_on_swaps_velocities(self):
        a, b = _make_pair("rock", "scissors")
        resolve_collision(a, b)
        np.testing.assert_allclose(a.vel, [-1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(b.vel, [1.0, 0.0], atol=1e-12)

    def test_tangential_component_is_kept(self):
        a, b = _make_pair("rock", "rock", pos_a=(0.0, 0.0), pos_b=(5.0, 0.0), vel_a=(1.0, 1.0), vel_b=(0.0, 0.0))
        resolve_collision(a, b)
        np.testing.assert_allclose(a.vel, [0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(b.vel, [1.0, 0.0], atol=1e-12)

    def test_oblique_contact_exchanges_normal_parts(self):
        # normal along the diagonal
        a, b = _make_pair("paper", "paper", pos_a=(0.0, 0.0), pos_b=(3.0, 3.0), vel_a=(2.0, 0.0), vel_b=(0.0, 0.0))
        resolve_collision(a, b)
        np.testing.assert_allclose(a.vel, [1.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(b.vel, [1.0, 1.0], atol=1e-12)

    @pytest.mark.parametrize("vel_a, vel_b", [
        ((1.5, -0.3), (-2.0, 0.7)),
        ((0.0, 4.0), (3.0, 0.0)),
        ((-1.0, -1.0), (0.25, 2.5)),
    ])
    def test_sum_of_squared_speeds_conserved(self, vel_a, vel_b):
        a, b = _make_pair("rock", "paper", pos_a=(20.0, 20.0), pos_b=(24.0, 23.0), vel_a=vel_a, vel_b=vel_b)
        before = pair_energy(a, b)
        resolve_collision(a, b)
        assert pair_energy(a, b) == pytest.approx(before)

    def test_collision_event_reports_pre_collision_normal_speed(self):
        a, b = _make_pair("rock", "rock")
        events = resolve_collision(a, b, tick=7)
        collision = events[0]
        assert isinstance(collision, CollisionEvent)
        assert collision.tick == 7
        assert (collision.a_id, collision.b_id) == (0, 1)
        assert collision.relative_speed == pytest.approx(2.0)
        np.testing.assert_allclose(collision.pos, [11.0, 50.0])


# ===========================================================================
# Kind conversion
# ===========================================================================


class TestConversion:

    def test_scissors_hit_by_rock_becomes_rock(self):
        a, b = _make_pair("rock", "scissors")
        events = resolve_collision(a, b)
        assert a.kind is ParticleKind.ROCK
        assert b.kind is ParticleKind.ROCK
        conversion = events[-1]
        assert isinstance(conversion, ConversionEvent)
        assert conversion.loser_id == 1
        assert conversion.winner_id == 0
        assert conversion.old_kind is ParticleKind.SCISSORS
        assert conversion.new_kind is ParticleKind.ROCK

    def test_first_argument_can_lose(self):
        a, b = _make_pair("scissors", "rock")
        resolve_collision(a, b)
        assert a.kind is ParticleKind.ROCK
        assert b.kind is ParticleKind.ROCK

    @pytest.mark.parametrize("kind", list(ParticleKind))
    def test_same_kind_never_converts(self, kind):
        a, b = _make_pair(kind, kind)
        events = resolve_collision(a, b)
        assert a.kind is kind and b.kind is kind
        assert [type(e) for e in events] == [CollisionEvent]

    @pytest.mark.parametrize("kind_a, kind_b", list(itertools.permutations(ParticleKind, 2)))
    def test_exactly_one_converts_to_winner_kind(self, kind_a, kind_b):
        a, b = _make_pair(kind_a, kind_b)
        resolve_collision(a, b)
        changed = [p for p, before in ((a, kind_a), (b, kind_b)) if p.kind is not before]
        assert len(changed) == 1
        winner = kind_a if kind_a.beats is kind_b else kind_b
        assert a.kind is winner and b.kind is winner


# ===========================================================================
# Degenerate input
# ===========================================================================


class TestDegenerateCollision:

    def test_coincident_centres_are_skipped(self):
        a, b = _make_pair("rock", "scissors", pos_a=(11.0, 50.0), pos_b=(11.0, 50.0))
        assert resolve_collision(a, b) is None
        np.testing.assert_array_equal(a.vel, [1.0, 0.0])
        np.testing.assert_array_equal(b.vel, [-1.0, 0.0])
        assert b.kind is ParticleKind.SCISSORS


class TestContact:

    def test_contact_is_strict(self):
        a, b = _make_pair("rock", "rock", pos_a=(0.0, 0.0), pos_b=(10.0, 0.0))
        assert not in_contact(a, b, 10.0)
        assert in_contact(a, b, 10.0 + 1e-9)
