"""
Unit tests for CarbonScoringService

Author: EcoBazaar
Date: 2025-11-04
"""
import itertools
import pytest
from decimal import Decimal

from ecobazaar.core.exceptions import InvalidAttributeError
from ecobazaar.services.carbon_scoring_service import CarbonScoringService, ScoringConfig


WEIGHTS = [Decimal('0'), Decimal('0.1'), Decimal('0.5'), Decimal('2'), Decimal('25'), Decimal('1000')]
DISTANCES = [Decimal('0'), Decimal('1'), Decimal('30'), Decimal('100'), Decimal('5000')]


@pytest.fixture
def service():
    return CarbonScoringService(ScoringConfig())


class TestScoreFormula:
    """Test the scoring formula with the default calibration"""

    def test_non_eco_product_scores_baseline(self, service):
        # 0.5 kg x 30 km x 0.05
        score = service.score(Decimal('0.5'), Decimal('30'), False)

        assert score.carbon_score == Decimal('0.75')
        assert score.carbon_reduction == Decimal('0')
        assert score.eco_points == 0

    def test_eco_product_gets_discount(self, service):
        score = service.score(Decimal('0.5'), Decimal('30'), True)

        assert score.carbon_score == Decimal('0.525')
        assert score.carbon_reduction == Decimal('0.225')
        # round(0.225 x 10) = 2
        assert score.eco_points == 2

    def test_jute_bag_example_eco_scores_lower(self, service):
        eco = service.score(Decimal('0.5'), Decimal('30'), True)
        regular = service.score(Decimal('0.5'), Decimal('30'), False)

        assert eco.carbon_score < regular.carbon_score

    def test_eco_points_round_half_up(self):
        service = CarbonScoringService(ScoringConfig(points_per_kg_reduction=Decimal('1')))

        # baseline 5, reduction 1.5 -> 2 points
        score = service.score(Decimal('1'), Decimal('100'), True)

        assert score.carbon_reduction == Decimal('1.5')
        assert score.eco_points == 2

    def test_eco_points_clamped_to_100(self, service):
        score = service.score(Decimal('1000'), Decimal('5000'), True)

        assert score.eco_points == 100

    def test_accepts_int_float_and_string_inputs(self, service):
        from_float = service.score(0.5, 30, True)
        from_str = service.score("0.5", "30", True)

        assert from_float == from_str
        assert from_float.carbon_score == Decimal('0.525')

    def test_zero_weight_scores_zero(self, service):
        score = service.score(Decimal('0'), Decimal('30'), True)

        assert score.carbon_score == 0
        assert score.carbon_reduction == 0
        assert score.eco_points == 0

    def test_custom_calibration(self):
        config = ScoringConfig(
            emission_factor=Decimal('0.1'),
            eco_discount=Decimal('0.5'),
            points_per_kg_reduction=Decimal('20'),
        )
        service = CarbonScoringService(config)

        score = service.score(Decimal('2'), Decimal('10'), True)

        assert score.carbon_score == Decimal('1')
        assert score.carbon_reduction == Decimal('1')
        assert score.eco_points == 20


class TestScoreProperties:
    """Properties that must hold over the whole valid input domain"""

    def test_eco_never_scores_higher(self, service):
        for weight, distance in itertools.product(WEIGHTS, DISTANCES):
            eco = service.score(weight, distance, True).carbon_score
            regular = service.score(weight, distance, False).carbon_score

            if weight == 0 or distance == 0:
                assert eco == regular
            else:
                assert eco < regular

    def test_eco_strictly_lower_for_tiny_inputs(self, service):
        eco = service.score(Decimal('0.001'), Decimal('0.001'), True).carbon_score
        regular = service.score(Decimal('0.001'), Decimal('0.001'), False).carbon_score

        assert eco < regular

    @pytest.mark.parametrize("is_eco_friendly", [True, False])
    def test_monotonic_in_weight_and_distance(self, service, is_eco_friendly):
        for distance in DISTANCES:
            scores = [service.score(w, distance, is_eco_friendly).carbon_score for w in WEIGHTS]
            assert scores == sorted(scores)

        for weight in WEIGHTS:
            scores = [service.score(weight, d, is_eco_friendly).carbon_score for d in DISTANCES]
            assert scores == sorted(scores)

    def test_eco_points_always_in_range(self, service):
        for weight, distance, eco in itertools.product(WEIGHTS, DISTANCES, [True, False]):
            assert 0 <= service.score(weight, distance, eco).eco_points <= 100

    def test_non_eco_reduction_is_zero(self, service):
        for weight, distance in itertools.product(WEIGHTS, DISTANCES):
            assert service.score(weight, distance, False).carbon_reduction == 0

    def test_idempotent(self, service):
        first = service.score(Decimal('0.3'), Decimal('100'), True)
        second = service.score(Decimal('0.3'), Decimal('100'), True)

        assert first == second


class TestScoreValidation:
    """Invalid inputs are rejected before anything is computed"""

    @pytest.mark.parametrize("weight,distance,field", [
        (Decimal('-0.1'), Decimal('10'), 'weight_kg'),
        (Decimal('1'), Decimal('-5'), 'shipping_distance_km'),
        (None, Decimal('10'), 'weight_kg'),
        ('heavy', Decimal('10'), 'weight_kg'),
        (float('nan'), Decimal('10'), 'weight_kg'),
        (Decimal('1'), float('inf'), 'shipping_distance_km'),
        (True, Decimal('10'), 'weight_kg'),
    ])
    def test_invalid_attribute_raises(self, service, weight, distance, field):
        with pytest.raises(InvalidAttributeError) as exc_info:
            service.score(weight, distance, True)

        assert exc_info.value.field == field

    @pytest.mark.parametrize("config", [
        ScoringConfig(eco_discount=Decimal('1')),
        ScoringConfig(eco_discount=Decimal('0')),
        ScoringConfig(emission_factor=Decimal('0')),
        ScoringConfig(points_per_kg_reduction=Decimal('-1')),
        ScoringConfig(max_eco_points=150),
    ])
    def test_invalid_calibration_rejected(self, config):
        with pytest.raises(ValueError):
            CarbonScoringService(config)

    def test_default_config_comes_from_settings(self):
        service = CarbonScoringService()

        assert service.config == ScoringConfig.from_settings()
