from diorama.population import ParticlePopulation
from diorama.config import EmitterConfig
from diorama.rng_service import RNGService


def test_same_seed_same_stream():
    a = RNGService(12345)
    b = RNGService(12345)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_values_are_in_unit_interval():
    rng = RNGService()
    assert all(0.0 <= rng.random() < 1.0 for _ in range(1000))


def test_seeded_spawn_batches_repeat():
    first = ParticlePopulation(EmitterConfig(), RNGService(9))
    second = ParticlePopulation(EmitterConfig(), RNGService(9))
    first.spawn(20, (0, 0, 0))
    second.spawn(20, (0, 0, 0))
    assert [tuple(p.position) for p in first] == [tuple(p.position) for p in second]
    assert [p.life for p in first] == [p.life for p in second]
