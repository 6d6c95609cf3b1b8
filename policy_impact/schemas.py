"""Pydantic request models for the HTTP adapter (camelCase on the wire)."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .policies import PolicyScenario, UserParameters

AnalysisLevel = Literal["simple", "detailed", "expert"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserParametersIn(_CamelModel):
    """Household profile"""
    income: float = Field(ge=0, allow_inf_nan=False, description="Annual income (yen)")
    family_size: str = Field(alias="familySize")
    region: str
    age: int = Field(ge=0)
    occupation: Optional[str] = None
    has_home_loan: bool = Field(default=False, alias="hasHomeLoan")

    def to_user(self) -> UserParameters:
        return UserParameters(
            income=self.income,
            family_size=self.family_size,
            region=self.region,
            age=self.age,
            occupation=self.occupation,
            has_home_loan=self.has_home_loan,
        )


class ScenarioIn(_CamelModel):
    """Proposed change; rateChange unit depends on the policy"""
    rate_change: float = Field(alias="rateChange", allow_inf_nan=False)
    label: str = ""
    base_rate: Optional[float] = Field(default=None, alias="baseRate", allow_inf_nan=False)

    def to_scenario(self, policy_id: str) -> PolicyScenario:
        return PolicyScenario(
            policy_id=policy_id,
            rate_change=self.rate_change,
            label=self.label,
            base_rate=self.base_rate,
        )


class SimulationRequest(_CamelModel):
    """POST /simulate body"""
    policy_id: str = Field(alias="policyId")
    user_parameters: UserParametersIn = Field(alias="userParameters")
    analysis_level: AnalysisLevel = Field(default="simple", alias="analysisLevel")
    scenario: Optional[ScenarioIn] = None
    implementation_date: Optional[str] = Field(default=None, alias="implementationDate")


class CompareRequest(_CamelModel):
    """POST /compare body"""
    scenarios: List[SimulationRequest] = Field(min_length=1)


class FiscalRequest(_CamelModel):
    """POST /fiscal body"""
    policy_id: str = Field(alias="policyId")
    scenario: Optional[ScenarioIn] = None
