"""Pydantic schemas for calculation results and scoring configuration."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    BUILTIN_STRATEGIES,
    DEFAULT_BOUNTY_POINT_VALUE,
    FIXED,
    PERCENTAGE,
    WEIGHTED,
    WINNER_TAKES_ALL,
)

# Constructor options each built-in strategy kind accepts
STRATEGY_OPTIONS = {
    WEIGHTED: {'max_point_positions'},
    FIXED: {'points_table'},
    PERCENTAGE: {'max_points', 'min_points_position'},
    WINNER_TAKES_ALL: {'winner_points'},
}


class PointsCalculationResult(BaseModel):
    """Points earned for a single finish, split into base and bounty points."""

    base_points: int = Field(..., ge=0)
    bounty_points: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    strategy_used: str = Field(..., min_length=1)

    class Config:
        extra = 'forbid'
        frozen = True


class StrategySettings(BaseModel):
    """A league-defined strategy: a built-in kind plus its options."""

    kind: str = Field(..., pattern=r'^(weighted|fixed|percentage|winner-takes-all)$')
    max_point_positions: int | None = Field(None, ge=1)
    points_table: dict[int, int] | None = None
    max_points: int | None = Field(None, gt=0)
    min_points_position: int | None = Field(None, ge=1)
    winner_points: int | None = Field(None, gt=0)

    @field_validator('points_table')
    @classmethod
    def validate_points_table(cls, v):
        """Ensure the table maps positions to non-negative points."""
        if v is None:
            return v
        for position, points in v.items():
            if position < 1:
                raise ValueError(f'Invalid position in points table: {position}')
            if points < 0:
                raise ValueError(f'Negative points for position {position}: {points}')
        return v

    @model_validator(mode='after')
    def validate_options_for_kind(self):
        """Ensure only options the kind's constructor takes are set."""
        allowed = STRATEGY_OPTIONS[self.kind]
        unexpected = sorted(set(self.options()) - allowed)
        if unexpected:
            raise ValueError(
                f"Options not supported by '{self.kind}' strategy: {', '.join(unexpected)}"
            )
        return self

    def options(self) -> dict:
        """Keyword arguments for the strategy constructor (unset options omitted)."""
        return self.model_dump(exclude={'kind'}, exclude_none=True)

    class Config:
        extra = 'forbid'


class ScoringConfig(BaseModel):
    """League scoring configuration."""

    default_strategy: str = Field(default=WEIGHTED, min_length=1)
    bounty_point_value: int = Field(default=DEFAULT_BOUNTY_POINT_VALUE, ge=0)
    strategies: dict[str, StrategySettings] = Field(default_factory=dict)

    @field_validator('strategies')
    @classmethod
    def validate_strategy_names(cls, v):
        """Ensure custom strategy names are usable, distinct registry keys."""
        seen = {}
        for name in v:
            if not name.strip():
                raise ValueError('Strategy names cannot be blank')
            key = name.strip().lower()
            if key in seen:
                raise ValueError(f"Strategy names '{seen[key]}' and '{name}' collide")
            seen[key] = name
        return v

    @model_validator(mode='after')
    def validate_default_strategy(self):
        """Ensure the default strategy is built in or defined here."""
        known = set(BUILTIN_STRATEGIES) | {name.strip().lower() for name in self.strategies}
        if self.default_strategy.strip().lower() not in known:
            raise ValueError(f'Unknown default strategy: {self.default_strategy}')
        return self

    class Config:
        extra = 'forbid'
