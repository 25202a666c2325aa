import pytest
from esper import World

from animeclash.components.power import Power
from animeclash.components.specialization import TitanForm
from animeclash.systems.attack_system import attack_bonus, attack_value, register_attack_bonus


def test_plain_entity_attacks_with_power():
    world = World()
    entity = world.create_entity(Power(value=20))
    assert attack_bonus(world, entity) == 0
    assert attack_value(world, entity) == 20


def test_titan_form_adds_flat_bonus():
    world = World()
    entity = world.create_entity(Power(value=30), TitanForm(name="Colossal Titan"))
    assert attack_value(world, entity) == 45


def test_duplicate_registration_is_rejected():
    with pytest.raises(ValueError):
        register_attack_bonus(TitanForm, lambda form: 1)
