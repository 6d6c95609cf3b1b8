"""
Reporting and Visualization Module

Generates formatted reports and charts for household and fiscal results.
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from .fiscal import FiscalResult
from .household import ScenarioComparison, SimulationResult
from .policies import PolicyScenario, UserParameters
from .scenarios import generate_timeline

logger = logging.getLogger(__name__)


class ImpactReport:
    """
    Reports for one household simulation result.
    """

    def __init__(self, result: SimulationResult,
                 user: Optional[UserParameters] = None,
                 scenario: Optional[PolicyScenario] = None):
        self.result = result
        self.user = user
        self.scenario = scenario

    def generate_text_report(self) -> str:
        """Generate a detailed text report."""
        r = self.result
        lines = []

        lines.append("=" * 60)
        lines.append("HOUSEHOLD POLICY IMPACT REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("POLICY")
        lines.append("-" * 40)
        lines.append(f"Policy: {r.policy_id}")
        if self.scenario is not None:
            lines.append(f"Scenario: {self.scenario.label or self.scenario.rate_change}")
            lines.append(f"Rate change: {self.scenario.rate_change:+g} ({self.scenario.rate_unit})")
        lines.append("")

        if self.user is not None:
            lines.append("HOUSEHOLD")
            lines.append("-" * 40)
            lines.append(f"Income:      {self.user.income:>14,.0f} yen/year")
            lines.append(f"Family:      {self.user.family_size:>14}")
            lines.append(f"Region:      {self.user.region:>14}")
            lines.append(f"Age:         {self.user.age:>14}")
            lines.append("")

        lines.append("MONTHLY IMPACT (yen)")
        lines.append("-" * 40)
        lines.append(f"Direct effect:              {r.direct_effect:>12,.0f}")
        lines.append(f"Indirect effect:            {r.indirect_effect:>12,.0f}")
        lines.append(f"General equilibrium effect: {r.general_equilibrium_effect:>12,.0f}")
        lines.append(f"Total impact:               {r.total_impact:>12,.0f}")
        lines.append(f"Annual equivalent:          {r.annual_impact:>12,.0f}")
        lines.append(f"Confidence: {r.confidence}")
        lines.append("")

        lines.append("SCENARIOS")
        lines.append("-" * 40)
        for s in r.scenarios:
            lines.append(f"{s.name:<14} {s.impact:>12,} yen  ({s.probability}%)")
        lines.append("")

        lines.append("TIMELINE")
        lines.append("-" * 40)
        for point in generate_timeline(r.total_impact):
            lines.append(f"{point.period:<14} {point.impact:>12,} yen")
        lines.append("")

        lines.append("NOTES")
        lines.append("-" * 40)
        lines.append("- Positive values mean the household is better off")
        if r.ripple_sector:
            lines.append(f"- Ripple effects use the '{r.ripple_sector}' input-output multipliers")
        lines.append("")

        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """Effect breakdown as a DataFrame (yen/month)."""
        r = self.result
        return pd.DataFrame({
            'Component': ['Direct', 'Indirect', 'General Equilibrium', 'Total'],
            'Monthly Impact (yen)': [
                r.direct_effect, r.indirect_effect, r.general_equilibrium_effect, r.total_impact,
            ],
        })

    def plot_impact(self, save_path: Optional[str] = None, show: bool = False) -> plt.Figure:
        """
        Effect breakdown and scenario spread side by side.
        """
        r = self.result
        fig, axes = plt.subplots(1, 2, figsize=(12, 5))
        fig.suptitle(f"Household Impact: {r.policy_id}", fontsize=14, fontweight='bold')

        # 1. Breakdown
        ax1 = axes[0]
        labels = ['Direct', 'Indirect', 'Induced']
        values = [r.direct_effect, r.indirect_effect, r.general_equilibrium_effect]
        colors = ['green' if v >= 0 else 'red' for v in values]
        ax1.bar(labels, values, color=colors, alpha=0.7)
        ax1.axhline(y=0, color='black', linestyle='-', linewidth=0.5)
        ax1.set_ylabel('yen / month')
        ax1.set_title(f'Effect Breakdown (total {r.total_impact:,.0f} yen)')
        ax1.yaxis.set_major_formatter(mticker.StrMethodFormatter('{x:,.0f}'))
        ax1.grid(True, alpha=0.3, axis='y')

        # 2. Scenarios
        ax2 = axes[1]
        names = [s.name for s in r.scenarios]
        impacts = [s.impact for s in r.scenarios]
        bars = ax2.bar(names, impacts, color=plt.cm.Set2(np.linspace(0, 1, len(names))))
        for bar, s in zip(bars, r.scenarios):
            ax2.annotate(f'{s.probability}%',
                         xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                         xytext=(0, 3),
                         textcoords="offset points",
                         ha='center', va='bottom', fontsize=9)
        ax2.axhline(y=0, color='black', linestyle='-', linewidth=0.5)
        ax2.set_ylabel('yen / month')
        ax2.set_title('Scenario Spread')
        ax2.yaxis.set_major_formatter(mticker.StrMethodFormatter('{x:,.0f}'))
        ax2.grid(True, alpha=0.3, axis='y')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig

    def display_summary(self):
        """Print a formatted summary to the console."""
        from rich.console import Console
        from rich.table import Table
        from rich.panel import Panel

        r = self.result
        console = Console()

        subtitle = self.scenario.label if self.scenario is not None else ""
        console.print(Panel(
            f"[bold blue]{r.policy_id}[/bold blue]\n{subtitle}",
            title="Household Policy Impact"
        ))

        console.print(f"\n[bold]Monthly impact:[/bold] {r.total_impact:,.0f} yen "
                      f"([italic]{r.confidence}[/italic] confidence)")

        table = Table(title="\nScenarios (yen / month)")
        table.add_column("Scenario", style="cyan")
        table.add_column("Impact", justify="right")
        table.add_column("Probability", justify="right")
        for s in r.scenarios:
            table.add_row(s.name, f"{s.impact:,}", f"{s.probability}%")
        console.print(table)

    def export_to_csv(self, filepath: str):
        """Export the breakdown to a CSV file."""
        self.to_dataframe().to_csv(filepath, index=False)
        logger.info(f"Results exported to {filepath}")


class FiscalReport:
    """
    Reports for national fiscal results.
    """

    def __init__(self, result: FiscalResult):
        self.result = result
        self.years = result.years

    def generate_text_report(self) -> str:
        """Generate a detailed text report."""
        r = self.result
        rev = r.tax_revenue
        lines = []

        lines.append("=" * 70)
        lines.append("FISCAL IMPACT REPORT")
        lines.append("=" * 70)
        lines.append("")

        lines.append(f"Policy: {r.policy_id}  (change {r.rate_change:+g})")
        lines.append("")

        lines.append("TAX REVENUE (trillion yen)")
        lines.append("-" * 40)
        lines.append(f"Current total:     {rev.current_total:>10,.2f}")
        lines.append(f"Impact:            {rev.impact_amount:>+10,.2f}  ({rev.impact_percentage:+.2f}%)")
        lines.append(f"New total:         {rev.new_total:>10,.2f}")
        lines.append("")

        econ = r.economic_impact
        lines.append("ECONOMIC EFFECTS")
        lines.append("-" * 40)
        lines.append(f"GDP:               {econ.gdp_impact:>+10,.2f} T yen")
        lines.append(f"Employment:        {econ.employment_impact:>+10,} people")
        lines.append(f"Consumption:       {econ.consumption_impact:>+10,.2f} T yen")
        lines.append("")

        lines.append("REVENUE TIMELINE (trillion yen)")
        lines.append("-" * 40)
        for year, impact in zip(self.years, r.timeline):
            lines.append(f"{year:>6} {impact:>+10,.2f}")
        lines.append(f"{'TOTAL':>6} {r.cumulative_impact:>+10,.2f}")
        lines.append("")

        lines.append("ALTERNATIVE TAX OPTIONS")
        lines.append("-" * 70)
        for p in r.alternative_taxes:
            lines.append(f"{p.tax_type:<28} {p.probability:>3}%  {p.rate}  [{p.impact}]")
        lines.append("")

        regional = r.regional
        lines.append("REGIONAL IMPACT (top regions, trillion yen)")
        lines.append("-" * 40)
        for region in regional.top_regions:
            lines.append(f"{region.name:<8} {region.economic_effect:>+10,.3f}  ({region.change_rate:+.2f}%)")
        lines.append(f"Disparity index: {regional.disparity_before:.3f} -> "
                     f"{regional.disparity_after:.3f} ({regional.disparity_change:+.3f})")
        lines.append("")

        return "\n".join(lines)

    def plot_fiscal_effects(self, save_path: Optional[str] = None,
                            show: bool = False) -> plt.Figure:
        """
        Revenue timeline and top regional effects.
        """
        r = self.result
        fig, axes = plt.subplots(1, 2, figsize=(14, 5))
        fig.suptitle(f"Fiscal Effects: {r.policy_id}", fontsize=14, fontweight='bold')

        # 1. Timeline
        ax1 = axes[0]
        ax1.bar(self.years, r.timeline,
                color=['green' if v >= 0 else 'red' for v in r.timeline], alpha=0.7)
        ax1.plot(self.years, np.cumsum(r.timeline), 'b-o', linewidth=2, label='Cumulative')
        ax1.axhline(y=0, color='black', linestyle='-', linewidth=0.5)
        ax1.set_xlabel('Year')
        ax1.set_ylabel('Revenue Effect (trillion yen)')
        ax1.set_title('Tax Revenue Impact')
        ax1.set_xticks(self.years)
        ax1.legend(loc='best')
        ax1.grid(True, alpha=0.3)

        # 2. Top regions
        ax2 = axes[1]
        regions = list(r.regional.top_regions)
        if regions:
            y = np.arange(len(regions))
            ax2.barh(y, [reg.economic_effect for reg in regions], color='purple', alpha=0.6)
            ax2.set_yticks(y)
            ax2.set_yticklabels([reg.name for reg in regions])
            ax2.invert_yaxis()
        ax2.axvline(x=0, color='black', linestyle='-', linewidth=0.5)
        ax2.set_xlabel('Economic Effect (trillion yen)')
        ax2.set_title('Largest Regional Effects')
        ax2.grid(True, alpha=0.3, axis='x')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig

    def display_summary(self):
        """Print a formatted summary to the console."""
        from rich.console import Console
        from rich.table import Table
        from rich.panel import Panel

        r = self.result
        console = Console()

        console.print(Panel(
            f"[bold blue]{r.policy_id}[/bold blue]  change {r.rate_change:+g}",
            title="Fiscal Impact"
        ))
        console.print(f"\n[bold]Revenue impact:[/bold] {r.revenue_delta:+,.2f} trillion yen "
                      f"({r.tax_revenue.impact_percentage:+.2f}%)")

        table = Table(title="\nRevenue Timeline (trillion yen)")
        table.add_column("Year", style="cyan")
        table.add_column("Impact", justify="right")
        for year, impact in zip(self.years, r.timeline):
            table.add_row(str(year), f"{impact:+,.2f}")
        table.add_row("[bold]Total[/bold]", f"[bold]{r.cumulative_impact:+,.2f}[/bold]")
        console.print(table)

    def export_to_csv(self, filepath: str):
        """Export the revenue timeline to a CSV file."""
        self.result.to_dataframe().to_csv(filepath, index=False)
        logger.info(f"Results exported to {filepath}")


def create_comparison_table(comparison: ScenarioComparison) -> str:
    """Create a text comparison table for several household scenarios."""
    lines = []
    lines.append("SCENARIO COMPARISON TABLE")
    lines.append("=" * 70)

    header = f"{'Scenario':<30} {'Monthly':>12} {'Annual':>14} {'Conf.':>8}"
    lines.append(header)
    lines.append("-" * 70)

    for label, r in zip(comparison.labels, comparison.results):
        name = label[:28] + ".." if len(label) > 30 else label
        lines.append(f"{name:<30} {r.total_impact:>12,.0f} {r.annual_impact:>14,.0f} {r.confidence:>8}")

    lines.append("-" * 70)
    if len(comparison.results) > 1:
        lines.append(f"{'SPREAD (best - worst)':<30} {comparison.spread:>12,.0f}")

    return "\n".join(lines)
