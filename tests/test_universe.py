from animeclash.components.universe import Universe


def test_universe_titles():
    assert Universe.ATTACK_ON_TITAN.title == "Attack on Titan"
    assert Universe.JUJUTSU_KAISEN.title == "Jujutsu Kaisen"
    assert Universe.DEMON_SLAYER.title == "Demon Slayer"


def test_universe_catalogue_is_closed():
    assert len(list(Universe)) == 3
