"""Data types for scored features and feature comparisons."""

from __future__ import annotations

from dataclasses import dataclass

from match_explainer.core.types import ScoringBucket, ScoringFrequency


@dataclass(frozen=True)
class ScoredFeature:
    """One side of a feature comparison."""

    feature_id: int | None
    feature_type: str | None
    feature_value: str | None
    usage_type: str | None = None


@dataclass(frozen=True)
class RelatedFeaturePair:
    """Two feature values, one per side of a relationship, that matched."""

    feature1: ScoredFeature
    feature2: ScoredFeature


@dataclass(frozen=True)
class CandidateKey:
    """A feature value that made an entity a resolution candidate."""

    feature_id: int | None
    feature_type: str | None
    feature_value: str | None


@dataclass(frozen=True)
class NameScoring:
    """Name comparison sub-scores. Absent scores are None, never negative."""

    full_name_score: int | None = None
    surname_score: int | None = None
    given_name_score: int | None = None
    generation_score: int | None = None
    org_name_score: int | None = None

    def as_full_score(self) -> int | None:
        """Pick the single most representative score.

        Organization name wins, then full name, surname, given name.
        The generation score never stands in for the full score.
        """
        for score in (
            self.org_name_score,
            self.full_name_score,
            self.surname_score,
            self.given_name_score,
        ):
            if score is not None:
                return score
        return None


@dataclass(frozen=True)
class ScoringBehavior:
    """Decoded engine scoring behavior such as ``FME`` or ``F1ES``."""

    frequency: ScoringFrequency
    exclusive: bool = False
    stable: bool = False

    @property
    def code(self) -> str:
        """Re-encode the behavior as the engine's compact code."""
        return (
            self.frequency.value
            + ("E" if self.exclusive else "")
            + ("S" if self.stable else "")
        )

    @classmethod
    def parse(cls, text: str) -> ScoringBehavior | None:
        """Parse a behavior code.

        Returns None when no known frequency prefixes the code.

        Raises:
            ValueError: If the text after the frequency is not ``""``,
                ``"E"`` or ``"ES"``.
        """
        normalized = text.strip().upper()
        frequency = next(
            (f for f in ScoringFrequency if normalized.startswith(f.value)),
            None,
        )
        if frequency is None:
            return None

        suffix = normalized[len(frequency.value):]
        if suffix == "":
            return cls(frequency)
        if suffix == "E":
            return cls(frequency, exclusive=True)
        if suffix == "ES":
            return cls(frequency, exclusive=True, stable=True)
        raise ValueError(f"Unrecognized scoring behavior: {text}")

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class FeatureScore:
    """Comparison of an inbound feature against a candidate feature."""

    feature_type: str
    inbound_feature: ScoredFeature
    candidate_feature: ScoredFeature
    full_score: int | None = None
    name_scoring: NameScoring | None = None
    scoring_bucket: ScoringBucket | None = None
    scoring_behavior: ScoringBehavior | None = None

    @property
    def score(self) -> int | None:
        """The full score, falling back to the name scoring summary."""
        if self.full_score is not None:
            return self.full_score
        if self.name_scoring is not None:
            return self.name_scoring.as_full_score()
        return None


@dataclass(frozen=True)
class SearchFeatureScore:
    """Feature comparison from a search, where features are plain text."""

    feature_type: str
    inbound_feature: str | None
    candidate_feature: str | None
    full_score: int | None = None
    name_scoring: NameScoring | None = None

    @property
    def score(self) -> int | None:
        """The full score, falling back to the name scoring summary."""
        if self.full_score is not None:
            return self.full_score
        if self.name_scoring is not None:
            return self.name_scoring.as_full_score()
        return None
