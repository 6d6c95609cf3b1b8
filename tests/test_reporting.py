"""
Tests for text reports, DataFrames, charts and console summaries.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from policy_impact.fiscal import calculate_fiscal_impact
from policy_impact.household import calculate_policy_impact, compare_scenarios
from policy_impact.reporting import FiscalReport, ImpactReport, create_comparison_table


@pytest.fixture
def impact_report(tokyo_family, consumption_tax_increase):
    result = calculate_policy_impact("consumption-tax", tokyo_family, consumption_tax_increase)
    return ImpactReport(result, user=tokyo_family, scenario=consumption_tax_increase)


@pytest.fixture
def fiscal_report(consumption_tax_increase):
    return FiscalReport(calculate_fiscal_impact("consumption-tax", consumption_tax_increase))


class TestImpactReport:
    """Test household reports."""

    def test_text_report(self, impact_report):
        text = impact_report.generate_text_report()

        assert "HOUSEHOLD POLICY IMPACT REPORT" in text
        assert "consumption-tax" in text
        assert "東京都" in text
        assert "pessimistic" in text
        assert "6 months" in text

    def test_text_report_without_context(self, impact_report):
        text = ImpactReport(impact_report.result).generate_text_report()

        assert "HOUSEHOLD" in text
        assert "Income:" not in text

    def test_to_dataframe(self, impact_report):
        df = impact_report.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 4
        total = df.loc[df["Component"] == "Total", "Monthly Impact (yen)"].iloc[0]
        assert total == pytest.approx(impact_report.result.total_impact)

    def test_plot(self, impact_report, tmp_path):
        path = tmp_path / "impact.png"
        fig = impact_report.plot_impact(save_path=str(path), show=False)

        assert len(fig.axes) == 2
        assert path.exists()
        plt.close(fig)

    def test_export_to_csv(self, impact_report, tmp_path):
        path = tmp_path / "impact.csv"
        impact_report.export_to_csv(str(path))

        assert len(pd.read_csv(path)) == 4

    def test_display_summary(self, impact_report, capsys):
        impact_report.display_summary()
        assert "consumption-tax" in capsys.readouterr().out


class TestFiscalReport:
    """Test fiscal reports."""

    def test_text_report(self, fiscal_report):
        text = fiscal_report.generate_text_report()

        assert "FISCAL IMPACT REPORT" in text
        assert "2027" in text
        assert "東京都" in text
        assert "Disparity index" in text

    def test_plot(self, fiscal_report):
        fig = fiscal_report.plot_fiscal_effects(show=False)

        assert len(fig.axes) == 2
        plt.close(fig)

    def test_export_to_csv(self, fiscal_report, tmp_path):
        path = tmp_path / "fiscal.csv"
        fiscal_report.export_to_csv(str(path))

        assert list(pd.read_csv(path)["Year"]) == [2024, 2025, 2026, 2027]

    def test_display_summary(self, fiscal_report, capsys):
        fiscal_report.display_summary()
        assert "Revenue" in capsys.readouterr().out


def test_comparison_table(tokyo_family, consumption_tax_increase, consumption_tax_cut):
    comparison = compare_scenarios(tokyo_family, [consumption_tax_increase, consumption_tax_cut])
    table = create_comparison_table(comparison)

    assert "SCENARIO COMPARISON TABLE" in table
    assert "12% (2pt increase)" in table
    assert "SPREAD" in table
