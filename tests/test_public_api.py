import statecomply
from statecomply import EntityType, US_STATES, is_known_state, list_entity_types


def test_fifty_canonical_states():
    assert len(US_STATES) == 50
    assert len(set(US_STATES)) == 50
    assert is_known_state("New Hampshire")
    assert not is_known_state("NH")
    assert not is_known_state("Default")


def test_list_entity_types_in_display_order():
    assert [e.value for e in list_entity_types()] == [
        "LLC",
        "Corporation",
        "Professional Corporation",
        "Non-Profit Corporation",
    ]
    assert list_entity_types()[0] is EntityType.LLC


def test_exports_resolve():
    for name in statecomply.__all__:
        assert hasattr(statecomply, name), name
