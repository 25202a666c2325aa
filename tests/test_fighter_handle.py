from esper import World

from animeclash.components.healable import Healable
from animeclash.components.universe import Universe
from animeclash.events.bus import EventBus, EVENT_FIGHTER_STATUS
from animeclash.factories.characters import create_character, create_sorcerer, create_titan_shifter
from animeclash.fighter import Fighter, FighterHandle
from animeclash.world import create_world
from tests.helpers import spawn_fighter


def test_handle_satisfies_fighter_protocol():
    bus = EventBus()
    world = create_world(bus)
    fighter = spawn_fighter(world, bus, "Tanjiro")
    assert isinstance(fighter, Fighter)


def test_specialised_attacks():
    bus = EventBus()
    world = create_world(bus)
    eren = FighterHandle(world, bus, create_titan_shifter(world, name="Eren", hp=120, power=30, titan_form="Attack Titan"))
    gojo = FighterHandle(world, bus, create_sorcerer(world, name="Gojo", hp=90, power=25, cursed_energy=100))
    plain = spawn_fighter(world, bus, "Zenitsu", power=20)

    assert eren.attack() == 45
    assert gojo.attack() == 35
    assert plain.attack() == 20


def test_cursed_energy_bonus_truncates():
    bus = EventBus()
    world = create_world(bus)
    low = FighterHandle(world, bus, create_sorcerer(world, name="Yuji", hp=90, power=10, cursed_energy=19))
    negative = FighterHandle(world, bus, create_sorcerer(world, name="Sukuna", hp=90, power=10, cursed_energy=-19))
    assert low.attack() == 11
    assert negative.attack() == 9


def test_heal_defaults_and_override():
    bus = EventBus()
    world = create_world(bus)
    gojo = FighterHandle(world, bus, create_sorcerer(world, name="Gojo", hp=1, power=1, cursed_energy=0))
    plain = spawn_fighter(world, bus, "Mikasa")

    assert gojo.heal() == 25
    assert plain.heal() is None


def test_shield_setter_guards_range():
    bus = EventBus()
    world = create_world(bus)
    fighter = spawn_fighter(world, bus, "Levi", shield=20)

    fighter.shield = 101
    assert fighter.shield == 20
    fighter.shield = -1
    assert fighter.shield == 20
    fighter.shield = 100
    assert fighter.shield == 100


def test_hp_setter_clamps_at_zero():
    bus = EventBus()
    world = create_world(bus)
    fighter = spawn_fighter(world, bus, "Armin", hp=50)
    fighter.hp = -10
    assert fighter.hp == 0


def test_status_emits_current_fields():
    bus = EventBus()
    world = create_world(bus)
    fighter = spawn_fighter(world, bus, "Nezuko", hp=70, power=15, shield=5)
    captured = {}
    bus.subscribe(EVENT_FIGHTER_STATUS, lambda s, **p: captured.update(p))

    fighter.status()

    assert captured["name"] == "Nezuko"
    assert captured["hp"] == 70
    assert captured["power"] == 15
    assert captured["shield"] == 5
    assert captured["universe"].title == "Demon Slayer"


def test_hp_setter_allows_values_above_spawn_hp():
    bus = EventBus()
    world = create_world(bus)
    fighter = spawn_fighter(world, bus, "Eren", hp=120)

    fighter.hp = 150
    assert fighter.hp == 150
    fighter.take_damage(20)
    assert fighter.hp == 130


def test_default_heal_amount_for_plain_healable():
    bus = EventBus()
    world = create_world(bus)
    entity = create_character(
        world,
        name="Shinobu",
        hp=60,
        power=15,
        universe=Universe.DEMON_SLAYER,
        extra_components=(Healable(),),
    )
    assert FighterHandle(world, bus, entity).heal() == 10


def test_damage_applies_on_a_bare_world():
    world = World()
    bus = EventBus()
    entity = create_character(world, name="Muzan", hp=100, power=50, universe=Universe.DEMON_SLAYER)
    fighter = FighterHandle(world, bus, entity)

    fighter.take_damage(30)
    fighter.take_damage(5)

    assert fighter.hp == 65
