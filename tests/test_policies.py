# tests/test_policies.py
"""
Pricing Policy Tests - Unit Tests for Offer-Level Markup Selection

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stayrate.application.policies (find_applicable_policy, policy_markup, gross_rate)
- stayrate.domain.models (PricingPolicy for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from stayrate.application.policies import find_applicable_policy, gross_rate, policy_markup
from stayrate.domain.enums import Channel
from stayrate.domain.errors import InvalidPricingInputError, UnknownEnumValueError
from stayrate.domain.models import PricingPolicy

GLOBAL = PricingPolicy("markup_pct", 10)
B2B = PricingPolicy("agent_commission", 8, channel=Channel.B2B)
OFFER = PricingPolicy("gross_fixed", 250, offer_id="spring-break")


class TestFindApplicablePolicy:
    def test_offer_beats_channel_beats_global(self):
        policies = [GLOBAL, B2B, OFFER]

        assert find_applicable_policy(policies, "b2b", "spring-break") is OFFER
        assert find_applicable_policy(policies, "b2b", "other") is B2B
        assert find_applicable_policy(policies, "web", "other") is GLOBAL

    def test_offer_policy_scoped_to_channel(self):
        scoped = PricingPolicy("markup_pct", 30, channel="reseller", offer_id="o1")

        assert find_applicable_policy([scoped, GLOBAL], Channel.WEB, "o1") is GLOBAL
        assert find_applicable_policy([scoped, GLOBAL], Channel.RESELLER, "o1") is scoped

    def test_inactive_policies_are_skipped(self):
        inactive = PricingPolicy("markup_pct", 50, channel=Channel.B2B, active=False)

        assert find_applicable_policy([inactive, GLOBAL], Channel.B2B) is GLOBAL

    def test_equal_specificity_keeps_input_order(self):
        first = PricingPolicy("markup_pct", 5)
        second = PricingPolicy("markup_pct", 15)

        assert find_applicable_policy([first, second], Channel.WEB) is first

    def test_no_match(self):
        assert find_applicable_policy([B2B], Channel.WEB) is None


class TestGrossRate:
    @pytest.mark.parametrize("policy,expected_markup", [
        (PricingPolicy("markup_pct", 25), 50.0),
        (PricingPolicy("agent_commission", 10), 20.0),
        (PricingPolicy("gross_fixed", 230), 30.0),
        (None, 0.0),
    ])
    def test_policy_markup(self, policy, expected_markup):
        assert policy_markup(200.0, policy) == pytest.approx(expected_markup)

    def test_gross_rate_without_policy(self):
        quote = gross_rate(120.0, [], Channel.WEB)

        assert quote.strategy == "none"
        assert quote.gross_rate == pytest.approx(120.0)

    def test_gross_fixed_below_net_is_a_discount(self):
        quote = gross_rate(300.0, [OFFER], Channel.WEB, "spring-break")

        assert quote.applied_markup == pytest.approx(-50.0)
        assert quote.gross_rate == pytest.approx(250.0)

    def test_negative_base_net(self):
        with pytest.raises(InvalidPricingInputError):
            gross_rate(-1.0, [GLOBAL], Channel.WEB)

    def test_unknown_strategy(self):
        with pytest.raises(UnknownEnumValueError):
            PricingPolicy("surge", 10)
