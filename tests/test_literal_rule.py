import pytest

from staticrules.rules import EqualsLiteralRuleFactory, LookupFailure, RuleConstructionError

from stubs import CountingReadAPI


def test_literal_rule_matches_plan():
    rule = EqualsLiteralRuleFactory("pro").new_rule(["plan"], {"id": "pro-users"})

    assert rule.satisfied(CountingReadAPI({"plan": "pro"})) is True
    assert rule.satisfied(CountingReadAPI({"plan": "free"})) is False
    assert rule.satisfied(CountingReadAPI({})) is False
    assert rule.get_attributes() == {"id": "pro-users"}


def test_literal_rule_with_absent_literal_requires_absent_value():
    rule = EqualsLiteralRuleFactory(None).new_rule(["plan"], "attrs")

    assert rule.satisfied(CountingReadAPI({"plan": None})) is True
    assert rule.satisfied(CountingReadAPI({})) is True
    assert rule.satisfied(CountingReadAPI({"plan": ""})) is False


def test_literal_rule_uses_first_key_only():
    rule = EqualsLiteralRuleFactory("us").new_rule(["region", "country"], None)
    api = CountingReadAPI({"region": "us", "country": "fr"})

    assert rule.key == "region"
    assert rule.satisfied(api) is True
    assert api.calls == ["region"]


def test_literal_rule_static_queries():
    rule = EqualsLiteralRuleFactory("pro").new_rule(["plan"], None)

    assert rule.key_match("plan") is True
    assert rule.key_match("tier") is False
    assert rule.satisfiable("plan", "pro") is True
    assert rule.satisfiable("plan", "free") is False
    assert rule.satisfiable("plan", None) is False
    assert rule.satisfiable("tier", "pro") is False


def test_absent_literal_is_only_satisfiable_by_absence():
    rule = EqualsLiteralRuleFactory(None).new_rule(["plan"], None)

    assert rule.satisfiable("plan", None) is True
    assert rule.satisfiable("plan", "pro") is False


def test_literal_rule_propagates_lookup_failure():
    rule = EqualsLiteralRuleFactory("pro").new_rule(["plan"], None)

    with pytest.raises(LookupFailure) as excinfo:
        rule.satisfied(CountingReadAPI({}, failing={"plan"}))

    assert excinfo.value.key == "plan"


def test_literal_rule_propagates_foreign_errors_unchanged():
    class BrokenAPI:
        def get(self, key):
            raise TimeoutError(key)

    rule = EqualsLiteralRuleFactory("pro").new_rule(["plan"], None)

    with pytest.raises(TimeoutError):
        rule.satisfied(BrokenAPI())


def test_literal_factory_rejects_empty_keys():
    factory = EqualsLiteralRuleFactory("pro")

    with pytest.raises(RuleConstructionError):
        factory.new_rule([], None)


def test_construction_error_and_lookup_failure_do_not_overlap():
    assert not issubclass(RuleConstructionError, LookupFailure)
    assert not issubclass(LookupFailure, RuleConstructionError)
    assert issubclass(RuleConstructionError, ValueError)


def test_rules_with_dict_payload_can_index_a_mapping():
    factory = EqualsLiteralRuleFactory("pro")
    first = factory.new_rule(["plan"], {"id": "pro-users"})
    second = factory.new_rule(["plan"], {"id": "pro-users"})

    index = {first: "bucket-a", second: "bucket-b"}

    assert index[first] == "bucket-a"
    assert index[second] == "bucket-b"
    assert first != second
    assert len({first, second}) == 2


def test_rules_are_immutable():
    rule = EqualsLiteralRuleFactory("pro").new_rule(["plan"], None)

    with pytest.raises(AttributeError):
        rule.value = "free"
