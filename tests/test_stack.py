from valuestack import Value1, Value2, of, of_nullable, of_optional
from fakes import must_not_call


def test_of_arity() -> None:
    assert isinstance(of("Cora"), Value1)
    assert isinstance(of("Cora", 4), Value2)
    assert isinstance(of_nullable(None), Value1)
    assert isinstance(of_optional(None, None), Value2)


def test_factories_accept_absent_values() -> None:
    assert of(None) == Value1.empty()
    assert of_nullable(None) == Value1.empty()
    assert of_optional(None, None) == Value2.empty()


def test_round_trip_single_slot() -> None:
    for v in ("Cora", None, 0, ""):
        assert of_optional(v).to_optional() == v


def test_round_trip_two_slots() -> None:
    for stack in (of("Cora", 4), of_nullable("Cora", None), of_nullable(None, 4), Value2.empty()):
        assert of_optional(*stack.to_optionals()) == stack


def test_falsy_values_are_present() -> None:
    assert of(0).is_present()
    assert of("").is_present()
    assert of(False, []).is_present()


def test_scenario_reduce_name_and_length() -> None:
    result = of("Cora").and_derive(len).reduce_all(lambda n, size: f"{n}{size}")
    assert result == of("Cora4")


def test_scenario_and_derive_on_absent() -> None:
    assert of_nullable(None).and_derive(must_not_call).is_empty()


def test_scenario_or_ignored_when_present() -> None:
    assert of("Cora").or_("Ignored") == of("Cora")


def test_scenario_if_all_present_on_empty() -> None:
    empty = of_nullable(None, None)
    assert empty.if_all_present(must_not_call) is empty


def test_both_containers_are_optional_like() -> None:
    from valuestack import OptionalLike

    for stack in (of("Cora"), of("Cora", 4), Value1.empty(), Value2.empty()):
        assert isinstance(stack, OptionalLike)
    assert not isinstance("Cora", OptionalLike)
