"""
============================================================================
Property Tests - Settlement Engine
============================================================================

Tests verify, for arbitrary matches:
1. Every hole row sums to zero; totals sum to zero
2. Totals are column sums of the delta matrix
3. Recompute from hole 1 is deterministic
4. Carry counts consecutive ties and resets after a settled hole
5. Individual holes: every loser pays the full stake
6. Team payouts balance for any W, L >= 1
============================================================================
"""

import math

import pytest
from hypothesis import given, settings as hyp_settings, strategies as st

from src.core.domain import MAX_PLAYERS, Hole, Pick, WagerSettings
from src.settlement import HoleMode, HoleStatus, compute_deltas, team_payouts


# =============================================================================
# Strategies
# =============================================================================

pick_strategy = st.sampled_from([Pick.A, Pick.B, Pick.SIT])
score_strategy = st.one_of(st.none(), st.integers(min_value=1, max_value=9))

hole_strategy = st.builds(
    Hole,
    par=st.integers(min_value=3, max_value=6),
    picks=st.lists(pick_strategy, min_size=MAX_PLAYERS, max_size=MAX_PLAYERS),
    scores=st.lists(score_strategy, min_size=MAX_PLAYERS, max_size=MAX_PLAYERS),
)

wager_settings_strategy = st.builds(
    WagerSettings,
    unit_wager=st.sampled_from([0.0, 0.5, 1.0, 2.0, 5.0]),
    carry_over=st.booleans(),
    double_on_one_below_par=st.booleans(),
    triple_on_two_below_par=st.booleans(),
    double_on_minority_win=st.booleans(),
)

names_strategy = st.lists(
    st.sampled_from(["Ann", "Bob", "Cat", "Dan", "Eve", "", "  "]),
    min_size=MAX_PLAYERS,
    max_size=MAX_PLAYERS,
)

holes_strategy = st.lists(hole_strategy, min_size=0, max_size=18)


# =============================================================================
# Zero-sum
# =============================================================================


class TestZeroSumProperty:
    """Zero-sum invariant for every hole and for totals."""

    @hyp_settings(max_examples=200)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_rows_and_totals_sum_to_zero(self, holes, wager, names):
        result = compute_deltas(holes, wager, names)

        for row in result.deltas:
            assert abs(math.fsum(row)) <= 1e-6
        assert abs(math.fsum(result.totals)) <= 1e-6

    @hyp_settings(max_examples=100)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_totals_are_column_sums(self, holes, wager, names):
        result = compute_deltas(holes, wager, names)

        for aj, total in enumerate(result.totals):
            assert total == pytest.approx(sum(row[aj] for row in result.deltas), abs=1e-9)

    @hyp_settings(max_examples=100)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_unsettled_rows_are_zero(self, holes, wager, names):
        result = compute_deltas(holes, wager, names)

        for outcome in result.outcomes:
            if outcome.status != HoleStatus.SETTLED:
                assert all(v == 0.0 for v in outcome.deltas)


# =============================================================================
# Determinism & carry
# =============================================================================


class TestFoldProperties:
    """The engine is a pure fold with carry as the only accumulator."""

    @hyp_settings(max_examples=100)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_recompute_is_deterministic(self, holes, wager, names):
        assert compute_deltas(holes, wager, names) == compute_deltas(holes, wager, names)

    @hyp_settings(max_examples=200)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_carry_transitions(self, holes, wager, names):
        result = compute_deltas(holes, wager, names)

        carry = 0
        for outcome in result.outcomes:
            assert outcome.carry_before == carry
            if outcome.status == HoleStatus.SETTLED:
                assert outcome.carry_after == 0
            elif outcome.status == HoleStatus.TIE and wager.carry_over:
                assert outcome.carry_after == carry + 1
            else:
                assert outcome.carry_after == carry
            carry = outcome.carry_after

        assert result.final_carry == carry

    @hyp_settings(max_examples=100)
    @given(
        ties=st.integers(min_value=0, max_value=10),
        wager=st.sampled_from([0.5, 1.0, 3.0]),
    )
    def test_stake_grows_by_one_unit_per_tie(self, ties, wager):
        settings = WagerSettings(
            unit_wager=wager,
            carry_over=True,
            double_on_one_below_par=False,
            triple_on_two_below_par=False,
            double_on_minority_win=False,
        )
        tie = Hole(par=4, picks=["A", "B"], scores=[5, 5])
        win = Hole(par=4, picks=["A", "B"], scores=[5, 6])

        result = compute_deltas([tie] * ties + [win], settings, ["Ann", "Bob"])

        assert result.outcomes[-1].stake == pytest.approx(wager * (1 + ties))
        assert result.final_carry == 0


# =============================================================================
# Payout shape
# =============================================================================


class TestPayoutProperties:
    """Payout shape in individual and team holes."""

    @hyp_settings(max_examples=200)
    @given(holes=holes_strategy, wager=wager_settings_strategy, names=names_strategy)
    def test_individual_losers_pay_full_stake(self, holes, wager, names):
        result = compute_deltas(holes, wager, names)

        for outcome in result.outcomes:
            if outcome.status != HoleStatus.SETTLED or outcome.mode != HoleMode.INDIVIDUAL:
                continue
            (winner,) = outcome.winners
            for aj in outcome.losers:
                assert outcome.deltas[aj] == pytest.approx(-outcome.stake)
            assert outcome.deltas[winner] == pytest.approx(outcome.stake * len(outcome.losers))

    @given(
        stake=st.floats(min_value=0.0, max_value=1000.0),
        n_winners=st.integers(min_value=1, max_value=MAX_PLAYERS),
        n_losers=st.integers(min_value=1, max_value=MAX_PLAYERS),
        minority=st.booleans(),
    )
    def test_team_payout_symmetry(self, stake, n_winners, n_losers, minority):
        settings = WagerSettings(
            carry_over=False,
            double_on_one_below_par=False,
            triple_on_two_below_par=False,
            double_on_minority_win=minority,
        )
        payout = team_payouts(stake, n_winners, n_losers, settings)

        assert payout.per_winner_gain * n_winners == pytest.approx(
            payout.per_loser_loss * n_losers, abs=1e-9
        )
