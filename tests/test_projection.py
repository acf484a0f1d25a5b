from dataclasses import replace

import pytest

from household_projection.core.inputs import CashFlowEntry, MortgageInputs
from household_projection.core.mortgage import monthly_payment
from household_projection.core.scenarios import base_config
from household_projection.core.simulator import ownership_costs, project, simulate, simulate_cached
from household_projection.core.timeline import month_label, select_window


def test_ownership_costs_include_extra_payment():
    config = replace(base_config(), mortgage=replace(base_config().mortgage, extra_payment_pct=10.0))
    costs = ownership_costs(config)
    base = monthly_payment(555_000, 6.825, 30)

    assert costs["base_payment"] == pytest.approx(base)
    assert costs["extra_payment"] == pytest.approx(base * 0.1)
    assert costs["effective_payment"] == pytest.approx(base * 1.1)
    assert costs["non_mortgage_cost"] == 1196
    assert costs["total_owning_cost"] == pytest.approx(base * 1.1 + 1196)


def test_project_returns_frame_indexed_by_month(example_config):
    result = project(example_config)

    assert result.path.index.name == "month"
    assert len(result.path) == 361
    assert "total_net_worth" in result.path.columns
    assert result.path.loc[360, "total_net_worth"] == result.snapshots[-1].total_net_worth


def test_summary_reports_payoff_and_final_position(example_config):
    summary = project(example_config).summary

    assert summary["payoff_month"] == 360
    assert summary["final_net_worth"] == pytest.approx(summary["final_total_brokerage"] + summary["final_cumulative_cash"])
    assert summary["total_interest_paid"] > 0


def test_payoff_month_is_none_when_loan_outlives_horizon():
    config = replace(base_config(), horizon_months=120)
    assert project(config).summary["payoff_month"] is None


def test_zero_rate_payoff_month():
    config = replace(
        base_config(), mortgage=MortgageInputs(principal=120_000, annual_rate_pct=0.0, term_years=10), horizon_months=180
    )
    assert project(config).summary["payoff_month"] == 120


def test_cached_simulation_reuses_results_for_equal_configs():
    config = base_config()
    assert simulate_cached(config) is simulate_cached(config)


def test_month_labels_start_in_january_2025():
    assert month_label(0) == "2025-01"
    assert month_label(11) == "2025-12"
    assert month_label(13) == "2026-02"
    assert month_label(0, start_year=2030) == "2030-01"


def test_select_window_is_inclusive(example_config):
    window = select_window(project(example_config).snapshots, 12, 24)

    assert [s.month for s in window] == list(range(12, 25))


def test_select_window_rejects_inverted_range(example_config):
    with pytest.raises(ValueError):
        select_window(project(example_config).snapshots, 24, 12)


def test_project_accepts_entries_given_as_a_list():
    config = replace(base_config(), extra_entries=[CashFlowEntry("Gym", -50.0)], horizon_months=12)

    result = project(config)

    assert config.extra_entries == (config.extra_entries[0],)
    assert len(result.snapshots) == 13
    assert result.snapshots == simulate(config)
